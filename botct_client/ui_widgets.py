"""
UI Widgets Module
Reusable Button and TextInput components for the tracker screens.
"""
import pygame


class Button:
    def __init__(self, x, y, width, height, text, color, on_click=None, text_color=(255, 255, 255), border_radius=10, font_size=32):
        self.rect = pygame.Rect(x, y, width, height)
        self.text = text
        self.color = color
        self.text_color = text_color
        self.on_click = on_click
        self.border_radius = border_radius
        self.hovered = False

        self.font = pygame.font.Font(None, font_size)

    def handle_event(self, event):
        if event.type == pygame.MOUSEMOTION:
            self.hovered = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1 and self.rect.collidepoint(event.pos):
                if self.on_click:
                    self.on_click()
                return True
        return False

    def draw(self, screen):
        color = self.color
        if self.hovered:
            # Simple brightness boost
            color = (min(color[0] + 20, 255), min(color[1] + 20, 255), min(color[2] + 20, 255))

        pygame.draw.rect(screen, color, self.rect, border_radius=self.border_radius)

        # Border
        pygame.draw.rect(screen, (255, 255, 255), self.rect, 2, border_radius=self.border_radius)

        # Text
        text_surf = self.font.render(self.text, True, self.text_color)
        text_rect = text_surf.get_rect(center=self.rect.center)
        screen.blit(text_surf, text_rect)


class TextInput:
    def __init__(self, x, y, width, height, text="", font_size=32, on_change=None, placeholder=""):
        self.rect = pygame.Rect(x, y, width, height)
        self.text = text
        self.on_change = on_change
        self.placeholder = placeholder
        self.active = False
        self.color_active = (255, 255, 255)
        self.color_passive = (200, 200, 200)
        self.font = pygame.font.Font(None, font_size)
        self.cursor_visible = True
        self.cursor_timer = 0

    def _set_text(self, text):
        if text == self.text:
            return
        self.text = text
        if self.on_change:
            self.on_change(text)

    def handle_event(self, event):
        if event.type == pygame.MOUSEBUTTONDOWN:
            # Wheel and right clicks also arrive as button presses
            if event.button != 1:
                return False
            self.active = self.rect.collidepoint(event.pos)
            return self.active

        if event.type == pygame.KEYDOWN and self.active:
            if event.key in (pygame.K_RETURN, pygame.K_ESCAPE, pygame.K_TAB):
                self.active = False
            elif event.key == pygame.K_BACKSPACE:
                self._set_text(self.text[:-1])
            elif event.unicode and event.unicode.isprintable():
                self._set_text(self.text + event.unicode)
            return True
        return False

    def update(self, dt):
        self.cursor_timer += dt
        if self.cursor_timer >= 0.5:
            self.cursor_visible = not self.cursor_visible
            self.cursor_timer = 0

    def draw(self, screen):
        color = self.color_active if self.active else self.color_passive

        # Background
        pygame.draw.rect(screen, (50, 50, 50), self.rect, border_radius=5)

        # Border
        pygame.draw.rect(screen, color, self.rect, 2, border_radius=5)

        # Text (or a dim placeholder when empty)
        if self.text:
            text_surface = self.font.render(self.text, True, (255, 255, 255))
        else:
            text_surface = self.font.render(self.placeholder, True, (120, 120, 120))

        # Clip text if too long
        screen.set_clip(self.rect)
        screen.blit(text_surface, (self.rect.x + 5, self.rect.y + (self.rect.height - text_surface.get_height()) // 2))

        # Cursor
        if self.active and self.cursor_visible:
            cursor_x = self.rect.x + 5 + (text_surface.get_width() if self.text else 0)
            cursor_y = self.rect.y + 5
            cursor_h = self.rect.height - 10
            pygame.draw.line(screen, (255, 255, 255), (cursor_x, cursor_y), (cursor_x, cursor_y + cursor_h), 2)

        screen.set_clip(None)

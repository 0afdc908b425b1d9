"""
Blood on the Clocktower table tracker.
Keeps a roster of players, marks deaths, and draws the seating chart.
"""

from botct_client.views.base_view import BaseView
from botct_client.views.roster_view import RosterView
from botct_client.views.table_view import TableView

__all__ = ["BaseView", "RosterView", "TableView"]

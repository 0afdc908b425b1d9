"""
Table Tracker
Main entry point for the application.
"""
import asyncio
from botct_client.table_controller import TableController


def main() -> None:
    """Main entry point."""
    tracker = TableController()
    asyncio.run(tracker.run())


if __name__ == "__main__":
    main()

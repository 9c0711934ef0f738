"""
Spreadsheet and CSV export for activities and events
"""

import io
from typing import Any, Dict, Iterable, List, Tuple
import pandas as pd
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.table import Table, TableStyleInfo

from app.models import Activity, Event

Sheet = Tuple[List[str], List[Dict[str, Any]]]

class ExportService:
    """Service for rendering entity sets to xlsx and csv"""

    ACTIVITY_COLUMNS = [
        'Id', 'Title', 'Date', 'Description', 'Category',
        'IsCancelled', 'City', 'Venue', 'Latitude', 'Longitude'
    ]
    EVENT_COLUMNS = [
        'EventId', 'EventName', 'EventDescription', 'Location',
        'GroupId', 'GroupName', 'GroupDescription'
    ]
    TABLE_STYLE = 'TableStyleMedium2'
    MAX_COLUMN_WIDTH = 60

    @staticmethod
    def activity_rows(activities: Iterable[Activity]) -> List[Dict[str, Any]]:
        return [
            {
                'Id': activity.id,
                'Title': activity.title,
                'Date': activity.date,
                'Description': activity.description,
                'Category': activity.category,
                'IsCancelled': activity.is_cancelled,
                'City': activity.city,
                'Venue': activity.venue,
                'Latitude': activity.latitude,
                'Longitude': activity.longitude,
            }
            for activity in activities
        ]

    @staticmethod
    def event_rows(events: Iterable[Event]) -> List[Dict[str, Any]]:
        return [
            {
                'EventId': str(event.event_id),
                'EventName': event.event_name,
                'EventDescription': event.event_description,
                'Location': event.location,
                'GroupId': str(event.group_id),
                'GroupName': event.group_name,
                'GroupDescription': event.group_description,
            }
            for event in events
        ]

    @staticmethod
    def to_excel(sheets: Dict[str, Sheet]) -> bytes:
        """Write one worksheet per entry of ``sheets``, each wrapped in an Excel table.

        ``sheets`` maps sheet name to ``(columns, rows)``; the table is named
        ``<SheetName>Table``.
        """
        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine='openpyxl') as writer:
            for sheet_name, (columns, rows) in sheets.items():
                df = pd.DataFrame(rows, columns=columns)
                df.to_excel(writer, index=False, sheet_name=sheet_name)

                worksheet = writer.sheets[sheet_name]
                # Excel tables need at least one body row
                last_row = max(len(rows) + 1, 2)
                ref = f"A1:{get_column_letter(len(columns))}{last_row}"
                table = Table(displayName=f"{sheet_name}Table", ref=ref)
                table.tableStyleInfo = TableStyleInfo(
                    name=ExportService.TABLE_STYLE,
                    showRowStripes=True,
                    showColumnStripes=False,
                )
                worksheet.add_table(table)
                ExportService._autofit_columns(worksheet, df)

        return buffer.getvalue()

    @staticmethod
    def _autofit_columns(worksheet, df: pd.DataFrame) -> None:
        for index, column in enumerate(df.columns, start=1):
            values = [str(v) for v in df[column].tolist() if not pd.isna(v)]
            width = max([len(column)] + [len(v) for v in values])
            worksheet.column_dimensions[get_column_letter(index)].width = min(
                width + 2, ExportService.MAX_COLUMN_WIDTH
            )

    @staticmethod
    def to_csv(columns: List[str], rows: List[Dict[str, Any]]) -> str:
        """Comma-separated text; fields holding a comma, quote or newline are quoted"""
        df = pd.DataFrame(rows, columns=columns)
        return df.to_csv(index=False, lineterminator='\n')

    @staticmethod
    def export_activities_excel(activities: Iterable[Activity]) -> bytes:
        rows = ExportService.activity_rows(activities)
        return ExportService.to_excel({'Activities': (ExportService.ACTIVITY_COLUMNS, rows)})

    @staticmethod
    def export_events_excel(events: Iterable[Event]) -> bytes:
        rows = ExportService.event_rows(events)
        return ExportService.to_excel({'Events': (ExportService.EVENT_COLUMNS, rows)})

    @staticmethod
    def export_activities_csv(activities: Iterable[Activity]) -> str:
        return ExportService.to_csv(ExportService.ACTIVITY_COLUMNS, ExportService.activity_rows(activities))

    @staticmethod
    def export_events_csv(events: Iterable[Event]) -> str:
        return ExportService.to_csv(ExportService.EVENT_COLUMNS, ExportService.event_rows(events))

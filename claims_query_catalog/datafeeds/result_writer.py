# ******************************************************************************
# PURPOSE:  write the rows of a catalog query to an Excel or CSV file
# ******************************************************************************
#   1. Columns are written in the order the query returns them
#   2. The Excel header row is bold and column widths follow the data, capped
#      at MAX_COLUMN_WIDTH characters
#   3. Null values are written as empty cells
# ******************************************************************************
from pathlib import Path
from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter
from claims_query_catalog.custom_exceptions.catalog_exceptions import (
    UnsupportedOutputFormatException,
)
from claims_query_catalog.definitions.custom_definitions import OutputFormat
from claims_query_catalog.logger import logger
from claims_query_catalog.models.catalog_models import ResultSet

MAX_COLUMN_WIDTH = 50
HEADER_FILL_COLOR = "D9E1F2"


def write_to_csv(result_set: ResultSet, output_file: Path) -> None:
    """Write the rows to a comma separated file with a header line."""
    result_set.to_dataframe().to_csv(output_file, index=False)


def write_to_excel(result_set: ResultSet, output_file: Path, sheet_name: str) -> None:
    """
    Write the rows to a single sheet workbook.

    parameters:
        result_set: ResultSet - The rows to write.
        output_file: Path - Destination .xlsx file.
        sheet_name: str - Title of the worksheet.
    """
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name

    for col, header in enumerate(result_set.columns, start=1):
        cell = ws.cell(row=1, column=col)
        cell.value = header
        cell.font = Font(bold=True)
        cell.alignment = Alignment(horizontal="center", wrap_text=True)
        cell.fill = PatternFill(fill_type="solid", fgColor=HEADER_FILL_COLOR)

    for row in result_set.rows:
        ws.append([row.get(column) for column in result_set.columns])

    # set column widths
    for col, header in enumerate(result_set.columns, start=1):
        values = [str(row.get(header)) for row in result_set.rows if row.get(header) is not None]
        width = max([len(str(header)), *(len(value) for value in values)]) + 2
        ws.column_dimensions[get_column_letter(col)].width = min(width, MAX_COLUMN_WIDTH)

    ws.freeze_panes = "A2"
    wb.save(output_file)


def write_result_set(
    result_set: ResultSet, output_path: str | Path, sheet_name: str = "results"
) -> Path:
    """
    Write a result set to a file chosen by its extension (.csv or .xlsx).

    Params:
        result_set (ResultSet): Rows returned by a template run.
        output_path (str | Path): Destination file.
        sheet_name (str): Worksheet title for Excel output.

    Returns:
        Path: The written file.

    Raises:
        UnsupportedOutputFormatException: If the extension is neither .csv nor .xlsx.
    """
    output_file = Path(output_path)
    try:
        output_format = OutputFormat(output_file.suffix.lower())
    except ValueError:
        raise UnsupportedOutputFormatException(
            f"{output_file.name} does not have a supported extension; "
            f"use one of {[fmt.value for fmt in OutputFormat]}"
        ) from None

    logger.info(f"Writing {len(result_set)} rows to {output_file}")
    if output_format == OutputFormat.CSV:
        write_to_csv(result_set, output_file)
    else:
        write_to_excel(result_set, output_file, sheet_name)
    logger.info("File written successfully")
    return output_file

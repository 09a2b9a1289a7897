# src/txtreport/core/report.py
import logging
from pathlib import Path
from typing import Iterable, List

from txtreport.config import ENCODING
from txtreport.models import CountRecord

logger = logging.getLogger(__name__)

def render_line(record: CountRecord) -> str:
    if record.has_error:
        return f"{record.file_name} - Erro ao processar."
    return f"{record.file_name} - {record.line_count} linhas - {record.word_count} palavras"

def aggregate(records: Iterable[CountRecord]) -> List[str]:
    """
    Renders one report line per record, ordered by file name.
    Sorting here is what makes the report independent of task completion order.
    """
    return [render_line(r) for r in sorted(records, key=lambda r: r.file_name)]

def write(lines: Iterable[str], destination: Path) -> Path:
    """
    Writes report lines to `destination`, creating parent directories and
    overwriting any previous report. Errors propagate; nothing is retried.
    """
    destination = Path(destination)
    destination.parent.mkdir(parents=True, exist_ok=True)

    # Text mode translates "\n" to the platform line separator
    with open(destination, "w", encoding=ENCODING) as f:
        for line in lines:
            f.write(f"{line}\n")

    logger.debug("Report written to %s", destination)
    return destination.resolve()

def generate_report(records: Iterable[CountRecord], destination: Path) -> Path:
    return write(aggregate(records), destination)

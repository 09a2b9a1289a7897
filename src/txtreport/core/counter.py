# src/txtreport/core/counter.py
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Iterable, List, Optional

from txtreport.config import MAX_WORKERS, READ_ENCODING
from txtreport.models import CountRecord
from txtreport.utils.tokenizer import Tokenizer

logger = logging.getLogger(__name__)

def count(path: Path, log: Optional[logging.Logger] = None) -> CountRecord:
    """
    Counts lines and words of a single text file.

    Never raises: a read failure (missing file, permission, bad encoding, ...)
    comes back as a record with `error_message` set and zero counts.
    """
    log = log or logger
    path = Path(path)
    file_name = path.name
    log.info("Processando: %s ...", file_name)

    try:
        text = path.read_text(encoding=READ_ENCODING)
        line_count, word_count = Tokenizer.count(text)
    except Exception as e:
        log.error("Erro ao processar o arquivo %s: %s", file_name, e)
        return CountRecord.failed(file_name, f"Erro: {e}")

    log.info("Concluído : %s - %d linha(s), %d palavra(s).", file_name, line_count, word_count)
    return CountRecord(file_name=file_name, line_count=line_count, word_count=word_count)

def count_all(
    paths: Iterable[Path],
    max_workers: Optional[int] = None,
    log: Optional[logging.Logger] = None,
) -> List[CountRecord]:
    """
    Runs `count` for every path concurrently and waits for all of them.
    Records come back in completion order; callers must sort if order matters.
    """
    paths = list(paths)
    if not paths:
        return []

    workers = max_workers or min(len(paths), MAX_WORKERS)
    results: List[CountRecord] = []

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(count, p, log) for p in paths]
        for fut in as_completed(futures):
            results.append(fut.result())

    return results

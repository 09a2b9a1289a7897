# src/txtreport/cli.py
import sys
import argparse
import logging
from pathlib import Path
from typing import Optional

# Module imports
from txtreport.config import REPORT_DIR, REPORT_FILE_NAME
from txtreport.core.counter import count_all
from txtreport.core.report import generate_report
from txtreport.core.scanner import InvalidDirectoryError, find_text_files, validate_directory

PROMPT = "Informe o caminho de um diretório contendo arquivos .txt:"

def create_arg_parser():
    parser = argparse.ArgumentParser(
        description="Counts lines and words of every .txt file in a directory and writes a consolidated report."
    )
    parser.add_argument(
        "directory",
        type=str,
        nargs="?",
        default=None,
        help="Directory containing .txt files (prompted for when omitted)",
    )
    return parser

def get_default_report_path() -> Path:
    """Report location under the current working directory."""
    return Path.cwd() / REPORT_DIR / REPORT_FILE_NAME

def setup_logging():
    # Progress lines are plain console status messages
    logging.basicConfig(level=logging.INFO, format="%(message)s", stream=sys.stdout)

def run(directory: Path, report_path: Optional[Path] = None) -> Optional[Path]:
    """
    Counts every matching file in `directory` and writes the report.
    Returns the absolute report path, or None when there was nothing to process.
    """
    files = find_text_files(directory)

    if not files:
        print("Nenhum arquivo .txt foi encontrado no diretório especificado.")
        return None

    print(f"\n{len(files)} arquivo(s) .txt encontrado(s):")
    for path in files:
        print(f"- {path.name}")
    print("\nIniciando processamento assíncrono...")

    # Barrier: the report is built only after every file has been counted
    records = count_all(files)

    return generate_report(records, report_path or get_default_report_path())

def main():
    try:
        # 1. Setup
        parser = create_arg_parser()
        args = parser.parse_args()
        setup_logging()

        print("=== Processador Assíncrono de Arquivos de Texto ===")

        raw_dir = args.directory
        if raw_dir is None:
            print(PROMPT)
            raw_dir = input()

        # 2. Validation
        try:
            directory = validate_directory(raw_dir)
        except InvalidDirectoryError:
            print("Caminho inválido ou diretório não encontrado.", file=sys.stderr)
            sys.exit(1)

        # 3. Processing
        report_path = run(directory)
        if report_path is None:
            return

        print("\nProcessamento concluído com sucesso!")
        print(f"Relatório gerado em: {report_path}")

    except (KeyboardInterrupt, EOFError):
        print("\nCancelado.")
        sys.exit(1)

    except Exception as e:
        print(f"\nOcorreu um erro inesperado: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()

# src/txtreport/config.py

# Files picked up from the input directory (gitwildmatch, matched on the base name)
DEFAULT_PATTERNS = [
    "*.txt",
]

# Report location, relative to the working directory
REPORT_DIR = "export"
REPORT_FILE_NAME = "relatorio.txt"

ENCODING = "utf-8"
# Same codec, but drops a leading BOM when reading
READ_ENCODING = "utf-8-sig"

# Upper bound on counting threads; one task is still submitted per file
MAX_WORKERS = 32

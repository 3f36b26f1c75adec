# clippings/config.py

DELIMITER = "=========="           # Separator line between raw records
INPUT_ENCODING = "utf-8-sig"        # Kindle exports start with a BOM
BOM = "\ufeff"

AM_MARKER = "上午"                   # Morning marker in zh-CN timestamps
PM_OFFSET = 12                      # Hours added for any other marker

DEFAULT_OUTPUT_DIR = "./output"
INDEX_FILE = "index.md"
SUMMARY_FILE = "summary.md"
TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"

"""
settings.py

Shared constants for huffcodec.
"""

VERSION = 1
FILE_SIGNATURE = b'HUF'

TEXT_PREPROCESSOR_CODE = 1
BYTE_PREPROCESSOR_CODE = 2
DEFAULT_PREPROCESSOR_CODE = TEXT_PREPROCESSOR_CODE

# Progress logs are displayed once every N steps.
PREPROCESSOR_STEP_INTERVAL = 10000
TREE_CONSTRUCTION_STEP_INTERVAL = 100
CODING_STEP_INTERVAL = 10000

FREQUENCY_TABLE_DISPLAY_LIMIT = 15
BAR_WIDTH = 15

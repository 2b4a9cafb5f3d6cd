"""
Configuration constants for all components.

Organized by component:
1. Clustering Configuration
2. Distribution Fitting Configuration
3. Spreadsheet I/O Configuration
4. CLI Configuration
"""

# ============================================================================
# CLUSTERING CONFIGURATION
# ============================================================================

DEFAULT_CLUSTER_COUNT = 3  # Used when the prompt is left empty
DEFAULT_MAX_ITERATIONS = 1000  # Safety cap for Lloyd iterations
DEFAULT_RANDOM_SEED = None  # None -> fresh entropy on every run


# ============================================================================
# DISTRIBUTION FITTING CONFIGURATION
# ============================================================================

# Parameter names per distribution family
NORMAL_PARAMETERS = ("Mean", "StdDev")
UNIFORM_PARAMETERS = ("Min", "Max")
EXPONENTIAL_PARAMETERS = ("Lambda",)

# Degrees of freedom used for the sample standard deviation
STDDEV_DDOF = 1

# Tolerance used when checking that cluster weights add up to one
WEIGHT_SUM_TOLERANCE = 1e-9


# ============================================================================
# SPREADSHEET I/O CONFIGURATION
# ============================================================================

# Input workbook layout: header in row 1, (timestamp, value) from row 2 on
INPUT_FIRST_DATA_ROW = 2
INPUT_TIMESTAMP_COLUMN = "timestamp"
INPUT_VALUE_COLUMN = "value"
TIMESTAMP_DISPLAY_FORMAT = "%d.%m.%Y %H:%M"

# Output workbook layout
RESULTS_SHEET_NAME = "Results"
RESULT_COLUMNS = ["Cluster ID", "Weight", "Distribution", "Parameters"]
PARAMETER_DELIMITER = ", "

EXCEL_ENGINE = "openpyxl"


# ============================================================================
# CLI CONFIGURATION
# ============================================================================

PROMPT_INPUT_PATH = "Enter path to the Excel file with measurements: "
PROMPT_OUTPUT_PATH = "Enter path to save the results (Excel): "
PROMPT_CLUSTER_COUNT = "Enter number of clusters (default: {default}): "

MESSAGE_NO_DATA = "No data to analyze."
MESSAGE_DONE = "Analysis complete. Results saved to {path}."

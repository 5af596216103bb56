"""Current version of runningmoments; reported by --version."""

moments_version = "1.0.0"
moments_date = "2026.10.19"

# Output formats understood by the command line.
OUTPUT_FORMATS = ("table", "json", "line")

# Decimal places shown in table output (describe() always uses 6).
DEFAULT_PRECISION = 6

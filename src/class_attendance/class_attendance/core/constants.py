"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# datetime.date.weekday(): Monday=0 ... Sunday=6
PRIMARY_WEEKDAY = 6
SECONDARY_WEEKDAY = 2

ALL_CLASSES = "All"

DEFAULT_CLASS_NAMES = (
    "Berçário",
    "Maternal",
    "Jardim",
    "Primários",
    "Juniores",
    "Adolescentes",
)

REPORT_CSV_FIELDS = ("student_id", "name", "class_name", "type", "presences")

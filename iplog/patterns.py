"""IP Log - Constants and patterns"""

VERSION = "1.0.0"

# Time window bounds: zero-padded dd.MM.yyyy or yyyy.MM.dd, tried in order
DATE_PATTERNS = [
    (r'^\d{2}\.\d{2}\.\d{4}$', '%d.%m.%Y'),
    (r'^\d{4}\.\d{2}\.\d{2}$', '%Y.%m.%d'),
]

# Log timestamps: the window formats, optionally with a time of day, or ISO-8601
TIMESTAMP_PATTERNS = [
    (r'^\d{2}\.\d{2}\.\d{4}$', '%d.%m.%Y'),
    (r'^\d{4}\.\d{2}\.\d{2}$', '%Y.%m.%d'),
    (r'^\d{2}\.\d{2}\.\d{4} \d{2}:\d{2}$', '%d.%m.%Y %H:%M'),
    (r'^\d{2}\.\d{2}\.\d{4} \d{2}:\d{2}:\d{2}$', '%d.%m.%Y %H:%M:%S'),
    (r'^\d{4}\.\d{2}\.\d{2} \d{2}:\d{2}$', '%Y.%m.%d %H:%M'),
    (r'^\d{4}\.\d{2}\.\d{2} \d{2}:\d{2}:\d{2}$', '%Y.%m.%d %H:%M:%S'),
    (r'^\d{4}-\d{2}-\d{2}$', '%Y-%m-%d'),
    (r'^\d{4}-\d{2}-\d{2}[ T]\d{2}:\d{2}$', None),
    (r'^\d{4}-\d{2}-\d{2}[ T]\d{2}:\d{2}:\d{2}$', None),
]

IPV4_PATTERN = r'^\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}$'

LINE_SEPARATOR = ':'
OUTPUT_SEPARATOR = ';'
DEFAULT_MASK = '0.0.0.0'

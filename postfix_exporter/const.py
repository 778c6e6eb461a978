"""Constants used by the postfix exporter."""

DEFAULT_SPOOL_DIR = "/var/spool/postfix"
DEFAULT_PID_FILE = "/var/spool/postfix/pid/master.pid"
DEFAULT_PORT = 9154
DEFAULT_LISTEN_HOSTS = ("0.0.0.0", "::")

# Largest value of a signed 32 bit pid_t
MAX_PID = 2**31 - 1

# Queue name -> directory depth below the queue directory
QUEUE_LAYOUT: dict[str, int] = {
    "incoming": 1,
    "active": 1,
    "corrupt": 1,
    "hold": 1,
    "deferred": 2,
}

# Sampling intervals in seconds. Walking and stat'ing every file of a large
# queue is expensive, so age sampling runs much less often than size sampling.
SIZE_SAMPLE_INTERVAL = 5.0
AGE_SAMPLE_INTERVAL = 60.0
LOG_ERROR_BACKOFF = 1.0

MAX_DATAGRAM_SIZE = 65_535
RECEIVE_TIMEOUT = 1.0

# Response bodies up to this size are sent uncompressed
COMPRESSION_THRESHOLD = 512

# Delivery delays are in seconds and reach from sub second to days
DELIVERY_DELAY_BUCKETS = (
    0.1,
    0.5,
    1.0,
    5.0,
    10.0,
    30.0,
    60.0,
    300.0,
    900.0,
    3600.0,
    21600.0,
    86400.0,
)

"""Fixed values shared across the SDK."""

PLATFORM = "server"

MAX_TRAFFIC_PERCENT = 100
MAX_TRAFFIC_VALUE = 10000
STATUS_RUNNING = "RUNNING"

SEED_VALUE = 1
MAX_EVENTS_PER_REQUEST = 5000
DEFAULT_REQUEST_TIME_INTERVAL = 600  # seconds, i.e. 10 minutes
DEFAULT_EVENTS_PER_REQUEST = 100

SDK_NAME = "vwo-fme-go-sdk"
SDK_VERSION = "1.3.0"

SETTINGS_EXPIRY = 10000000
SETTINGS_TIMEOUT = 50000

NETWORK_TIMEOUT = 30.0  # seconds

HOST_NAME = "dev.visualwebsiteoptimizer.com"
SETTINGS_ENDPOINT = "/server-side/v2-settings"
WEBHOOK_SETTINGS_ENDPOINT = "/server-side/v2-pull"

VWO_FS_ENVIRONMENT = "vwo_fs_environment"
HTTPS_PROTOCOL = "https"
HTTP_PROTOCOL = "http"

RANDOM_ALGO = 1
VWO_META_MEG_KEY = "_vwo_meta_meg_"
VARIATION_TARGETING_USER_ID_KEY = "_vwoUserId"

DEFAULT_POLL_INTERVAL = 600000  # milliseconds, i.e. 10 minutes
FME = "fme"

BASE_URL = ""
ENDPOINT_ATTRIBUTE_CHECK = "/check-attribute"
ENDPOINT_GET_USER_DATA = "/get-user-details"
QUERY_PARAM_USER_AGENT = "userAgent"
QUERY_PARAM_IP_ADDRESS = "ipAddress"

MAX_CAMPAIGN_VALUE = 100

NETWORK_CALL_EXCEPTION = "NETWORK_CALL_EXCEPTION"
FLAG_DECISION = "FLAG_DECISION"
POLLING = "polling"
NETWORK_CALL_SUCCESS_WITH_RETRIES = "NETWORK_CALL_SUCCESS_WITH_RETRIES"
NETWORK_CALL_FAILURE_AFTER_MAX_RETRIES = "NETWORK_CALL_FAILURE_AFTER_MAX_RETRIES"
IMPACT_ANALYSIS = "IMPACT_ANALYSIS"

NON_RETRYABLE_EVENTS: tuple[str, ...] = (
    "vwo_sdkDebug",
    "vwo_sdkUsageStats",
    "vwo_fmeSdkInit",
)
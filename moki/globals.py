"""Global constants for the Moki library."""

API_URL_ENV = "MOKI_API_URL"
TENANT_ID_ENV = "MOKI_TENANT_ID"
API_KEY_ENV = "MOKI_API_KEY"

API_PREFIX = "/rest/v1/api/tenants/{tenant_id}"
API_KEY_HEADER = "X-Moki-TenantAPIKey"

SERIAL_PREFIX = "sn-!-"

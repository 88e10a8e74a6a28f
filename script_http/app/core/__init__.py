SERVICE_NAME = "script_http"

import os
from dotenv import load_dotenv

load_dotenv()

# logging level names mapped to the names uvicorn accepts
LOG_LEVELS = {
    "CRITICAL": "critical",
    "FATAL": "critical",
    "ERROR": "error",
    "WARNING": "warning",
    "WARN": "warning",
    "INFO": "info",
    "DEBUG": "debug",
}

host = os.getenv("SERVER_HOST", "0.0.0.0")
port = int(os.getenv("SERVER_PORT", "8080"))
log_level = os.getenv("LOG_LEVEL", "INFO").upper()
if log_level not in LOG_LEVELS:
    raise ValueError(f"Unsupported LOG_LEVEL: {log_level}")
uvicorn_log_level = LOG_LEVELS[log_level]
environment = os.getenv("APP_ENVIRONMENT", "none specified")

if __name__ == "__main__":
    print(host, port, log_level, environment)

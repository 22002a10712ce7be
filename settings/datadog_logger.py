import json
import logging
import os
import re
from typing import Optional

import requests

# =========================
# Datadog Configuration
# =========================

# US1 site
DATADOG_LOG_URL = "https://http-intake.logs.datadoghq.com/v1/input"

# ONLY exclude very noisy internals
EXCLUDED_LOGGERS = {
    "multipart",
    "httpcore",
    "urllib3",
}

# =========================
# Datadog Logging Handler
# =========================

class DatadogLogger(logging.Handler):
    def __init__(self, service: str, api_key: Optional[str], env: Optional[str] = None,
                 include_loggers: Optional[str] = None):
        super().__init__()
        self.service = service
        self.api_key = api_key
        self.env = env or os.getenv("ENV", "qa")

        # Optional allowlist (comma-separated logger prefixes)
        # Example: org_chart,uvicorn.access
        self.include_loggers = (
            [p.strip() for p in include_loggers.split(",") if p.strip()]
            if include_loggers
            else None
        )

        # Uvicorn already formats access logs
        self.setFormatter(logging.Formatter("%(message)s"))

        # "IP:PORT - "METHOD PATH HTTP_VERSION" STATUS_CODE"
        self.access_log_pattern = re.compile(
            r'(\d+\.\d+\.\d+\.\d+):(\d+)\s+-\s+"(\w+)\s+([^\s?]+)(?:\?[^"]*)?\s+HTTP/[^"]+"\s+(\d+)'
        )

    def parse_access_log(self, message: str) -> dict:
        """
        Parse uvicorn access log to extract structured fields.
        Returns dict with http.method, http.url, http.status_code, etc.
        """
        match = self.access_log_pattern.match(message)
        if not match:
            return {}

        client_ip, client_port, method, path, status_code = match.groups()

        return {
            "http.method": method,
            "http.url": path,
            "http.status_code": int(status_code),
            "http.client_ip": client_ip,
            "http.client_port": int(client_port),
        }

    def should_log(self, record: logging.LogRecord) -> bool:
        """
        Decide whether to send this log to Datadog.
        """
        logger_name = record.name

        if self.include_loggers:
            return any(logger_name.startswith(prefix) for prefix in self.include_loggers)

        for excluded in EXCLUDED_LOGGERS:
            if logger_name.startswith(excluded):
                return False

        return True

    def build_payload(self, record: logging.LogRecord) -> dict:
        message = record.getMessage()
        payload = {
            "message": message,
            "ddsource": "python",
            "service": self.service,
            "hostname": os.getenv("HOSTNAME"),
            "status": record.levelname.lower(),
            "ddtags": f"env:{self.env},service:{self.service}",
            "logger": record.name,
        }

        # Structured fields set via extra= land as attributes on the record
        http_method = getattr(record, "http.method", None)
        http_status = getattr(record, "http.status_code", None)
        event_type = getattr(record, "event_type", None)

        if http_method or http_status:
            for attr, value in vars(record).items():
                if attr.startswith("http.") or attr in ("duration_ms", "event_type"):
                    if value is not None:
                        payload[attr] = value

            tags = [f"env:{self.env}", f"service:{self.service}"]
            if http_method:
                tags.append(f"http.method:{http_method.lower()}")
            if http_status:
                tags.append(f"http.status_code:{http_status}")
            if event_type:
                tags.append(f"event_type:{event_type}")
            payload["ddtags"] = ",".join(tags)

        elif record.name == "uvicorn.access":
            http_fields = self.parse_access_log(message)
            if http_fields:
                payload.update(http_fields)
                method = http_fields.get("http.method", "").lower()
                status = http_fields.get("http.status_code", "")
                payload["ddtags"] += f",http.method:{method},http.status_code:{status}"

        return payload

    def emit(self, record: logging.LogRecord):
        if not self.api_key:
            return

        try:
            if not self.should_log(record):
                return

            headers = {
                "Content-Type": "application/json",
                "DD-API-KEY": self.api_key,
            }

            requests.post(
                DATADOG_LOG_URL,
                headers=headers,
                data=json.dumps(self.build_payload(record), default=str),
                timeout=2,
            )

        except Exception:
            # Never break the app because of logging
            self.handleError(record)

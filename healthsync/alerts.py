## healthsync/alerts.py

from __future__ import annotations
import os, smtplib, requests
from email.mime.text import MIMEText
from .utils import logger


def send_email(subject: str, body: str):
    """SMTP alert; silently skipped unless SMTP_HOST/USER/PASS and ALERT_EMAIL_TO are set."""
    host = os.getenv("SMTP_HOST"); user = os.getenv("SMTP_USER"); pwd = os.getenv("SMTP_PASS")
    to_addr = os.getenv("ALERT_EMAIL_TO")
    if not all([host, user, pwd, to_addr]):
        return
    msg = MIMEText(body)
    msg["Subject"] = f"[HealthSync] {subject}"
    msg["From"] = user
    msg["To"] = to_addr
    with smtplib.SMTP(host, int(os.getenv("SMTP_PORT", "587")), timeout=10) as s:
        s.starttls(); s.login(user, pwd); s.sendmail(user, [to_addr], msg.as_string())
    logger.info(f"Alert email sent to {to_addr}: {subject}")


def send_slack(text: str):
    url = os.getenv("SLACK_WEBHOOK_URL")
    if not url: return
    r = requests.post(url, json={"text": text}, timeout=5)
    r.raise_for_status()


def notify_failure(path: str, error: Exception):
    """Report an ingestion failure on every configured channel. A broken
    channel is logged and does not stop the others."""
    for send, args in (
        (send_email, ("Report ingestion failure", f"File: {path}\nError: {error}")),
        (send_slack, (f":rotating_light: report ingestion failed for {path}: {error}",)),
    ):
        try:
            send(*args)
        except Exception as e:
            logger.warning(f"Alert via {send.__name__} failed: {e}")

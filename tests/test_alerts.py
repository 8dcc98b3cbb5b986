import requests

from healthsync import alerts


class _Resp:
    def __init__(self, status=200):
        self.status = status

    def raise_for_status(self):
        if self.status >= 400:
            raise requests.HTTPError(f"status {self.status}")


def test_channels_are_noops_without_config(monkeypatch):
    def boom(*a, **kw):
        raise AssertionError("should not be called")
    monkeypatch.setattr(alerts.requests, "post", boom)
    monkeypatch.setattr(alerts.smtplib, "SMTP", boom)
    alerts.send_slack("hello")
    alerts.send_email("subject", "body")


def test_slack_posts_to_webhook(monkeypatch):
    calls = []
    monkeypatch.setenv("SLACK_WEBHOOK_URL", "https://hooks.example/abc")
    monkeypatch.setattr(alerts.requests, "post", lambda url, **kw: calls.append((url, kw)) or _Resp())
    alerts.send_slack("report failed")
    assert calls == [("https://hooks.example/abc", {"json": {"text": "report failed"}, "timeout": 5})]


def test_notify_failure_survives_broken_channel(monkeypatch):
    monkeypatch.setenv("SLACK_WEBHOOK_URL", "https://hooks.example/abc")
    monkeypatch.setattr(alerts.requests, "post", lambda url, **kw: _Resp(500))
    alerts.notify_failure("incoming/x.txt", ValueError("bad"))

"""
Custom logging format that tags json logs with the application being rendered
"""

# First Party
from alog import AlogJsonFormatter


class AppsodyJsonFormatter(AlogJsonFormatter):
    """Custom Log Format that extends AlogJsonFormatter to add the identity of
    the AppsodyApplication being processed to each json log line
    """

    _FIELDS_TO_PRINT = AlogJsonFormatter._FIELDS_TO_PRINT + [
        "process",
        "thread",
        "threadName",
        "kind",
        "appName",
        "appNamespace",
    ]

    def __init__(self, app=None):
        super().__init__()
        self.app = app

    def format(self, record):
        if app := getattr(record, "app", self.app):
            record.kind = app.cr_manifest.get("kind")
            record.appName = app.name
            record.appNamespace = app.namespace
        return super().format(record)

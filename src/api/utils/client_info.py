from starlette.datastructures import Headers

from src.app.services.audit_logger import UNKNOWN, ClientInfo


def extract_ip_address(headers: Headers) -> str:
    """
    Originating client address.

    First entry of X-Forwarded-For, else X-Real-IP, else "unknown".
    """
    forwarded = headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first

    real_ip = headers.get("x-real-ip")
    if real_ip and real_ip.strip():
        return real_ip.strip()

    return UNKNOWN


def extract_client_info(headers: Headers) -> ClientInfo:
    return ClientInfo(
        ip_address=extract_ip_address(headers),
        user_agent=headers.get("user-agent") or UNKNOWN,
    )

"""
DNS name and IP address syntax validation
"""

import ipaddress
import re
from typing import List

DNS1123_LABEL_FMT = r"[a-z0-9]([-a-z0-9]*[a-z0-9])?"
DNS1123_SUBDOMAIN_FMT = DNS1123_LABEL_FMT + r"(\." + DNS1123_LABEL_FMT + r")*"
DNS1123_SUBDOMAIN_ERROR_MSG = (
    "a lowercase RFC 1123 subdomain must consist of lower case alphanumeric characters, "
    "'-' or '.', and must start and end with an alphanumeric character"
)
DNS1123_LABEL_MAX_LENGTH = 63
DNS1123_SUBDOMAIN_MAX_LENGTH = 253

IP_ADDRESS_ERROR_MSG = "must be a valid IP address, (e.g. 10.9.8.7 or 2001:db8::ffff)"

_dns1123_subdomain_re = re.compile(DNS1123_SUBDOMAIN_FMT)


def max_len_error(length: int) -> str:
    return f"must be no more than {length} characters"


def regex_error(msg: str, fmt: str, *examples: str) -> str:
    """Build a message describing a failed regex match, with optional examples"""
    if not examples:
        return f"{msg} (regex used for validation is '{fmt}')"
    quoted = " or ".join(f"'{example}', " for example in examples)
    return f"{msg} (e.g. {quoted}regex used for validation is '{fmt}')"


def is_dns1123_subdomain(value: str) -> List[str]:
    """Return the RFC 1123 subdomain violations of value, empty if valid"""
    errors = []
    if len(value) > DNS1123_SUBDOMAIN_MAX_LENGTH:
        errors.append(max_len_error(DNS1123_SUBDOMAIN_MAX_LENGTH))
    if any(len(label) > DNS1123_LABEL_MAX_LENGTH for label in value.split(".")):
        errors.append(max_len_error(DNS1123_LABEL_MAX_LENGTH))
    if not _dns1123_subdomain_re.fullmatch(value):
        errors.append(
            regex_error(DNS1123_SUBDOMAIN_ERROR_MSG, DNS1123_SUBDOMAIN_FMT, "example.com")
        )
    return errors


def is_valid_ip(value: str) -> List[str]:
    """Return the IP address violations of value, empty if valid"""
    # scoped IPv6 literals such as fe80::1%eth0 are not plain addresses
    if "%" in value:
        return [IP_ADDRESS_ERROR_MSG]
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return [IP_ADDRESS_ERROR_MSG]
    return []

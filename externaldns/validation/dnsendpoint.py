"""
DNSEndpoint validation

Every check returns None when the value is valid, or the FieldError describing
the first problem found. Errors are returned, never raised.
"""

from typing import Optional

from externaldns.apis.v1 import TTL, DNSEndpoint, DNSEndpointSpec, Endpoint, Targets
from externaldns.utils.field import ErrorType, FieldError
from externaldns.utils.validation import is_dns1123_subdomain, is_valid_ip

# Record types implemented by the external-dns project, in declaration order
VALID_RECORD_TYPES = ("A", "CNAME", "TXT", "SRV", "NS", "PTR")
_valid_record_types = frozenset(VALID_RECORD_TYPES)


class DNSEndpointValidationError(ValueError):
    """Wraps the FieldError that rejected a DNSEndpoint"""

    def __init__(self, cause: FieldError):
        super().__init__(f"error validating DNSEndpoint: {cause}")
        self.cause = cause
        self.__cause__ = cause


def verify_dns_record_type(record: str) -> Optional[FieldError]:
    """Check that record is a supported DNS record type"""
    if record not in _valid_record_types:
        return FieldError(
            ErrorType.NOT_SUPPORTED,
            "RecordType",
            record,
            f"supported values: {', '.join(VALID_RECORD_TYPES)}",
        )
    return None


def verify_dns_name(name: str) -> Optional[FieldError]:
    """Check that name is a valid DNS subdomain"""
    result = is_dns1123_subdomain(name)
    if not result:
        return None
    return FieldError(ErrorType.INVALID, "DNSName", name, ", ".join(result))


def verify_targets(targets: Targets) -> Optional[FieldError]:
    """Check that every target is an IP address, reporting the first that is not"""
    for target in targets:
        result = is_valid_ip(target)
        if not result:
            continue
        return FieldError(ErrorType.INVALID, "Targets", target, result[0])
    return None


def verify_ttl(ttl: TTL) -> Optional[FieldError]:
    if ttl <= 0:
        return FieldError(ErrorType.INVALID, "TTL", ttl, "ttl value should be > 0")
    return None


def verify_endpoint(endpoint: Endpoint) -> Optional[FieldError]:
    """Check all Endpoint fields: name, then targets, then record type, then TTL"""
    checks = (
        (verify_dns_name, endpoint.dns_name),
        (verify_targets, endpoint.targets),
        (verify_dns_record_type, endpoint.record_type),
        (verify_ttl, endpoint.record_ttl),
    )
    for check, value in checks:
        err = check(value)
        if err is not None:
            return err
    return None


def verify_dns_endpoint_spec(spec: DNSEndpointSpec) -> Optional[FieldError]:
    """Check that endpoints are provided and each one is valid"""
    if not spec.endpoints:
        return FieldError(ErrorType.REQUIRED, "Endpoints", spec, "a list of endpoints")
    for endpoint in spec.endpoints:
        err = verify_endpoint(endpoint)
        if err is not None:
            return err
    return None


def validate_dns_endpoint(dnsendpoint: DNSEndpoint) -> Optional[DNSEndpointValidationError]:
    """Validate all DNSEndpoint fields"""
    err = verify_dns_endpoint_spec(dnsendpoint.spec)
    if err is not None:
        return DNSEndpointValidationError(err)
    return None


validate_endpoint = verify_endpoint
validate_dns_endpoint_spec = verify_dns_endpoint_spec

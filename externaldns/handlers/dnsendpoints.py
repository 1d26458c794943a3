"""
Handlers for DNSEndpoint resources
"""

import kopf
import logging
from externaldns.apis.v1 import GROUP, VERSION, PLURAL, DNSEndpoint
from externaldns.validation.dnsendpoint import validate_dns_endpoint

logger = logging.getLogger(__name__)


@kopf.on.validate(GROUP, VERSION, PLURAL, id="validate-dnsendpoint")
def admit_dnsendpoint(body, name, namespace, logger, **kwargs):
    """Reject invalid DNSEndpoints at admission"""
    err = validate_dns_endpoint(DNSEndpoint.from_body(body))
    if err is not None:
        logger.info(f"Rejecting DNSEndpoint {namespace}/{name}: {err}")
        raise kopf.AdmissionError(str(err), code=422)


@kopf.on.create(GROUP, VERSION, PLURAL)
@kopf.on.update(GROUP, VERSION, PLURAL)
@kopf.on.resume(GROUP, VERSION, PLURAL)
def validate_dnsendpoint(body, name, namespace, logger, **kwargs):
    """Validate a stored DNSEndpoint and report the outcome in its status"""
    logger.info(f"Validating DNSEndpoint {namespace}/{name}")

    dnsendpoint = DNSEndpoint.from_body(body)
    err = validate_dns_endpoint(dnsendpoint)
    if err is not None:
        raise kopf.PermanentError(f"Invalid DNSEndpoint: {err}")

    return {"status": "valid", "endpoints": len(dnsendpoint.spec.endpoints)}

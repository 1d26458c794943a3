"""
Main entry point for the DNSEndpoint validation operator
"""

import logging
import sys
import kopf
import os

# Import handlers
from externaldns.apis.v1 import GROUP, PLURAL
from externaldns.handlers import dnsendpoints  # noqa: F401

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
    ],
)

logger = logging.getLogger(__name__)

WEBHOOK_CONFIGURATION_NAME = f"dnsendpoint.{GROUP}"


@kopf.on.startup()
def configure_operator(settings: kopf.OperatorSettings, **_):
    """Configure operator for production use"""

    # Watching configuration
    settings.watching.server_timeout = 60
    settings.watching.client_timeout = 120

    # Posting configuration
    settings.posting.enabled = True
    settings.posting.level = logging.INFO

    # Peering configuration
    settings.peering.name = "externaldns-validator"
    settings.peering.mandatory = True

    # Execution configuration
    settings.execution.max_workers = 10

    # Admission configuration
    webhook_host = os.getenv("ADMISSION_WEBHOOK_HOST")
    if webhook_host:
        port = int(os.getenv("ADMISSION_WEBHOOK_PORT", "9443"))
        settings.admission.server = kopf.WebhookServer(addr="0.0.0.0", port=port, host=webhook_host)
        settings.admission.managed = WEBHOOK_CONFIGURATION_NAME
        logger.info(f"Admission webhook for {PLURAL}.{GROUP} served on {webhook_host}:{port}")

    logger.info("DNSEndpoint validation operator configured successfully")


@kopf.on.login()
def login(**kwargs):
    """Handle authentication

    In-cluster deployments use the pod's service account; development runs
    always go through the kubernetes client and the local kubeconfig.
    """
    if os.getenv("KOPF_ENV") != "development":
        credentials = kopf.login_with_service_account(**kwargs)
        if credentials is not None:
            return credentials
    return kopf.login_via_client(**kwargs)


def main():
    """Main entry point"""
    namespace = os.getenv("OPERATOR_NAMESPACE")
    kopf.run(
        standalone=True,
        clusterwide=not namespace,
        namespaces=[namespace] if namespace else [],
    )


if __name__ == "__main__":
    main()

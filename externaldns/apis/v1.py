"""
DNSEndpoint custom resource types (externaldns.k8s.io/v1alpha1)
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from kubernetes import client

GROUP = "externaldns.k8s.io"
VERSION = "v1alpha1"
PLURAL = "dnsendpoints"
KIND = "DNSEndpoint"

# Targets is the list of addresses a DNS name resolves to
Targets = List[str]

# TTL is the record time-to-live in seconds
TTL = int


@dataclass
class ProviderSpecificProperty:
    """Key/value option passed through to the DNS provider"""

    name: str = ""
    value: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProviderSpecificProperty":
        return cls(name=data.get("name") or "", value=data.get("value") or "")


@dataclass
class Endpoint:
    """A single DNS record: name, targets, record type and TTL"""

    dns_name: str = ""
    targets: Targets = field(default_factory=list)
    record_type: str = ""
    record_ttl: TTL = 0
    set_identifier: str = ""
    labels: Dict[str, str] = field(default_factory=dict)
    provider_specific: List[ProviderSpecificProperty] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Endpoint":
        return cls(
            dns_name=data.get("dnsName") or "",
            targets=list(data.get("targets") or []),
            record_type=data.get("recordType") or "",
            record_ttl=data.get("recordTTL") or 0,
            set_identifier=data.get("setIdentifier") or "",
            labels=dict(data.get("labels") or {}),
            provider_specific=[
                ProviderSpecificProperty.from_dict(p) for p in data.get("providerSpecific") or []
            ],
        )


@dataclass
class DNSEndpointSpec:
    """Desired state of a DNSEndpoint"""

    endpoints: List[Endpoint] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "DNSEndpointSpec":
        data = data or {}
        return cls(endpoints=[Endpoint.from_dict(e) for e in data.get("endpoints") or []])


@dataclass
class DNSEndpointStatus:
    """Observed state of a DNSEndpoint"""

    observed_generation: int = 0

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "DNSEndpointStatus":
        data = data or {}
        return cls(observed_generation=data.get("observedGeneration") or 0)


@dataclass
class DNSEndpoint:
    """The DNSEndpoint resource as submitted to the cluster"""

    metadata: client.V1ObjectMeta = field(default_factory=client.V1ObjectMeta)
    spec: DNSEndpointSpec = field(default_factory=DNSEndpointSpec)
    status: DNSEndpointStatus = field(default_factory=DNSEndpointStatus)

    @classmethod
    def from_body(cls, body: Mapping[str, Any]) -> "DNSEndpoint":
        """Build a DNSEndpoint from a raw Kubernetes object body"""
        meta = body.get("metadata") or {}
        return cls(
            metadata=client.V1ObjectMeta(
                name=meta.get("name"),
                namespace=meta.get("namespace"),
                uid=meta.get("uid"),
                generation=meta.get("generation"),
                labels=meta.get("labels"),
                annotations=meta.get("annotations"),
            ),
            spec=DNSEndpointSpec.from_dict(body.get("spec")),
            status=DNSEndpointStatus.from_dict(body.get("status")),
        )

"""Tests for DNSEndpoint resource parsing"""

from externaldns.apis.v1 import DNSEndpoint, Endpoint


def test_dnsendpoint_from_body():
    body = {
        "apiVersion": "externaldns.k8s.io/v1alpha1",
        "kind": "DNSEndpoint",
        "metadata": {"name": "cafe", "namespace": "default", "generation": 2},
        "spec": {
            "endpoints": [
                {
                    "dnsName": "cafe.example.com",
                    "targets": ["10.0.0.1", "10.0.0.2"],
                    "recordType": "A",
                    "recordTTL": 300,
                    "setIdentifier": "blue",
                    "labels": {"owner": "cafe"},
                    "providerSpecific": [{"name": "aws/weight", "value": "10"}],
                }
            ]
        },
        "status": {"observedGeneration": 1},
    }

    dnsendpoint = DNSEndpoint.from_body(body)

    assert dnsendpoint.metadata.name == "cafe"
    assert dnsendpoint.metadata.namespace == "default"
    assert dnsendpoint.metadata.generation == 2
    assert dnsendpoint.status.observed_generation == 1

    endpoint = dnsendpoint.spec.endpoints[0]
    assert endpoint.dns_name == "cafe.example.com"
    assert endpoint.targets == ["10.0.0.1", "10.0.0.2"]
    assert endpoint.record_type == "A"
    assert endpoint.record_ttl == 300
    assert endpoint.set_identifier == "blue"
    assert endpoint.labels == {"owner": "cafe"}
    assert endpoint.provider_specific[0].name == "aws/weight"
    assert endpoint.provider_specific[0].value == "10"


def test_missing_fields_parse_to_zero_values():
    endpoint = Endpoint.from_dict({})
    assert endpoint == Endpoint()
    assert endpoint.targets == []
    assert endpoint.record_ttl == 0

    dnsendpoint = DNSEndpoint.from_body({})
    assert dnsendpoint.spec.endpoints == []
    assert dnsendpoint.metadata.name is None
    assert dnsendpoint.status.observed_generation == 0


def test_null_spec_parses_to_empty_spec():
    dnsendpoint = DNSEndpoint.from_body({"metadata": {"name": "x"}, "spec": None})
    assert dnsendpoint.spec.endpoints == []


def test_null_fields_parse_to_zero_values():
    endpoint = Endpoint.from_dict(
        {
            "dnsName": None,
            "targets": None,
            "recordType": None,
            "recordTTL": None,
            "setIdentifier": None,
            "labels": None,
            "providerSpecific": [{"name": None, "value": None}],
        }
    )
    assert endpoint.dns_name == ""
    assert endpoint.targets == []
    assert endpoint.record_type == ""
    assert endpoint.record_ttl == 0
    assert endpoint.set_identifier == ""
    assert endpoint.labels == {}
    assert endpoint.provider_specific[0].name == ""
    assert endpoint.provider_specific[0].value == ""

    dnsendpoint = DNSEndpoint.from_body({"status": {"observedGeneration": None}})
    assert dnsendpoint.status.observed_generation == 0

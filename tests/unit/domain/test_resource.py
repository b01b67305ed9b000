"""
Unit tests for Resource Domain Models
"""
import pytest

from brandhub.core.domain.resource import (
    ResourceKind,
    HostingResource,
    DnsResource,
    DomainResource,
    AnalyticsResource,
    GenericResource,
    build_resource,
    coerce_resource,
    normalize_kind,
)
from brandhub.core.domain.exceptions import InvalidResourceError


class TestBuildResource:
    """Test decoding wire data into resource variants"""

    def test_hosting(self):
        resource = build_resource("hosting", {
            "provider": "Hostinger",
            "plan": "Business Shared",
            "loginUrl": "https://hpanel.hostinger.com",
            "username": "admin@giftalink",
            "password": "••••••••",
            "expiry": "2024-12-15"
        })
        assert isinstance(resource, HostingResource)
        assert resource.login_url == "https://hpanel.hostinger.com"
        assert resource.kind == "hosting"

    def test_dns_nameservers_keep_order(self):
        resource = build_resource(ResourceKind.DNS, {
            "provider": "Cloudflare",
            "nameservers": ["ns2.cloudflare.com", "ns1.cloudflare.com"]
        })
        assert isinstance(resource, DnsResource)
        assert resource.nameservers == ("ns2.cloudflare.com", "ns1.cloudflare.com")

    def test_domain_and_analytics(self):
        domain = build_resource("domain", {"provider": "GoDaddy", "autoRenew": False})
        analytics = build_resource("analytics", {"provider": "GA", "googleId": "UA-1"})
        assert isinstance(domain, DomainResource) and domain.auto_renew is False
        assert isinstance(analytics, AnalyticsResource) and analytics.google_id == "UA-1"

    def test_unknown_kind_is_generic(self):
        resource = build_resource("email", {"provider": "Fastmail", "plan": "Team"})
        assert isinstance(resource, GenericResource)
        assert resource.plan == "Team"

    def test_empty_provider_rejected(self):
        with pytest.raises(InvalidResourceError, match="provider"):
            build_resource("hosting", {"provider": "  "})

    def test_missing_provider_rejected(self):
        with pytest.raises(InvalidResourceError, match="provider"):
            build_resource("hosting", {"plan": "Pro"})

    def test_unknown_field_rejected(self):
        with pytest.raises(InvalidResourceError, match="Unknown resource field"):
            build_resource("hosting", {"provider": "AWS", "region": "eu-west-1"})

    def test_foreign_field_rejected_in_strict_mode(self):
        with pytest.raises(InvalidResourceError, match="not valid for a dns resource"):
            build_resource("dns", {"provider": "Cloudflare", "autoRenew": True})

    def test_foreign_field_dropped_in_lenient_mode(self):
        resource = build_resource(
            "dns",
            {"provider": "Cloudflare", "autoRenew": True},
            strict=False
        )
        assert resource == DnsResource(provider="Cloudflare")

    def test_none_values_ignored(self):
        resource = build_resource("hosting", {"provider": "AWS", "plan": None})
        assert resource.plan is None


class TestResourceSerialization:
    def test_to_dict_omits_absent_fields(self):
        assert HostingResource(provider="Vercel", plan="Pro").to_dict() == {
            "provider": "Vercel",
            "plan": "Pro"
        }

    def test_to_dict_uses_wire_names(self):
        data = DomainResource(provider="GoDaddy", auto_renew=True).to_dict()
        assert data == {"provider": "GoDaddy", "autoRenew": True}

    def test_nameservers_serialized_as_list(self):
        data = DnsResource(provider="Cloudflare", nameservers=["a", "b"]).to_dict()
        assert data["nameservers"] == ["a", "b"]

    def test_resources_are_immutable(self):
        resource = HostingResource(provider="Vercel")
        with pytest.raises(Exception):  # FrozenInstanceError
            resource.provider = "AWS"


class TestNormalizeKind:
    def test_enum_and_string(self):
        assert normalize_kind(ResourceKind.HOSTING) == "hosting"
        assert normalize_kind(" DNS ") == "dns"

    def test_empty_kind(self):
        with pytest.raises(InvalidResourceError):
            normalize_kind("")


class TestCoerceResource:
    def test_mapping_is_decoded(self):
        assert coerce_resource("dns", {"provider": "Cloudflare"}) == DnsResource(provider="Cloudflare")

    def test_matching_variant_passes_through(self):
        dns = DnsResource(provider="Cloudflare")
        assert coerce_resource(ResourceKind.DNS, dns) is dns

    def test_variant_of_another_kind(self):
        with pytest.raises(InvalidResourceError, match="must be a HostingResource"):
            coerce_resource("hosting", DnsResource(provider="X", nameservers=["ns1"]))

    def test_unmodelled_kind_requires_generic(self):
        with pytest.raises(InvalidResourceError):
            coerce_resource("email", AnalyticsResource(provider="Fastmail"))
        generic = GenericResource(provider="Fastmail")
        assert coerce_resource("email", generic) is generic

    def test_known_kind_rejects_generic(self):
        with pytest.raises(InvalidResourceError):
            coerce_resource("domain", GenericResource(provider="GoDaddy"))

    def test_not_a_resource(self):
        with pytest.raises(InvalidResourceError):
            coerce_resource("hosting", "Vercel")

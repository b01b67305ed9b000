"""
Unit tests for Brand Domain Models

Tests:
- BrandId derivation from names
- BrandStatus parsing
- Brand aggregate changes and serialization
"""
import pytest

from brandhub.core.domain.brand import Brand, BrandId, BrandStatus
from brandhub.core.domain.resource import HostingResource, DnsResource, GenericResource
from brandhub.core.domain.exceptions import (
    InvalidBrandError,
    InvalidResourceError,
    ResourceNotFoundError,
)


class TestBrandId:
    """Test BrandId value object"""

    @pytest.mark.parametrize("name,expected", [
        ("Acme", "acme"),
        ("Gift a Link", "gift-a-link"),
        ("Fusion   Agency", "fusion-agency"),
        ("Tab\tSeparated\nName", "tab-separated-name"),
        (" Padded ", "-padded-"),
    ])
    def test_from_name(self, name, expected):
        """Lower-case, whitespace runs collapsed to one hyphen"""
        assert BrandId.from_name(name).value == expected

    def test_from_name_is_deterministic(self):
        assert BrandId.from_name("Next Tech") == BrandId.from_name("Next Tech")

    def test_case_and_spacing_variants_collide(self):
        assert BrandId.from_name("Next  Tech") == BrandId.from_name("next tech")

    def test_empty_id_rejected(self):
        with pytest.raises(InvalidBrandError):
            BrandId("")

    def test_brand_id_immutable(self):
        brand_id = BrandId("acme")
        with pytest.raises(Exception):  # FrozenInstanceError
            brand_id.value = "other"


class TestBrandStatus:
    def test_parse_valid(self):
        assert BrandStatus.parse("warning") is BrandStatus.WARNING

    def test_parse_invalid(self):
        with pytest.raises(InvalidBrandError, match="status must be one of"):
            BrandStatus.parse("archived")


class TestBrand:
    """Test Brand aggregate root"""

    def test_defaults(self):
        brand = Brand(id=BrandId("acme"), name="Acme")
        assert brand.status is BrandStatus.ACTIVE
        assert brand.resources == {}
        assert brand.color == "#6366f1"
        assert brand.industry == "Technology"

    def test_empty_name_rejected(self):
        with pytest.raises(InvalidBrandError, match="name cannot be empty"):
            Brand(id=BrandId("x"), name="   ")

    def test_string_status_is_parsed(self):
        brand = Brand(id=BrandId("acme"), name="Acme", status="inactive")
        assert brand.status is BrandStatus.INACTIVE

    @pytest.mark.parametrize("logo,is_image", [
        ("🎁", False),
        ("https://cdn.example.com/logo.png", True),
        ("http://example.com/logo.png", True),
        ("", False),
    ])
    def test_logo_is_image(self, logo, is_image):
        assert Brand(id=BrandId("a"), name="A", logo=logo).logo_is_image() is is_image

    def test_with_changes_keeps_id_when_name_changes(self):
        brand = Brand(id=BrandId("acme"), name="Acme")
        renamed = brand.with_changes(name="Acme Corporation")
        assert renamed.id == BrandId("acme")
        assert renamed.name == "Acme Corporation"
        assert brand.name == "Acme"

    def test_with_changes_rejects_id(self):
        brand = Brand(id=BrandId("acme"), name="Acme")
        with pytest.raises(InvalidBrandError, match="Cannot update brand fields"):
            brand.with_changes(id="other")

    def test_with_changes_keeps_resources_and_status(self):
        hosting = HostingResource(provider="Vercel")
        brand = Brand(
            id=BrandId("acme"),
            name="Acme",
            status=BrandStatus.WARNING,
            resources={"hosting": hosting}
        )
        updated = brand.with_changes(color="#000000")
        assert updated.status is BrandStatus.WARNING
        assert updated.resources == {"hosting": hosting}

    def test_with_no_changes_is_equal(self):
        brand = Brand(id=BrandId("acme"), name="Acme")
        assert brand.with_changes() == brand

    def test_with_resource_does_not_touch_original(self):
        brand = Brand(id=BrandId("acme"), name="Acme")
        updated = brand.with_resource("hosting", HostingResource(provider="Vercel"))
        assert "hosting" in updated.resources
        assert brand.resources == {}

    def test_with_resource_rejects_other_variant(self):
        brand = Brand(id=BrandId("acme"), name="Acme")
        with pytest.raises(InvalidResourceError, match="HostingResource"):
            brand.with_resource("hosting", DnsResource(provider="X", nameservers=["ns1"]))

    def test_with_resource_unmodelled_kind_needs_generic(self):
        brand = Brand(id=BrandId("acme"), name="Acme")
        with pytest.raises(InvalidResourceError):
            brand.with_resource("email", HostingResource(provider="Fastmail"))
        updated = brand.with_resource("email", GenericResource(provider="Fastmail"))
        assert updated.resources["email"].provider == "Fastmail"

    def test_with_changes_decodes_resource_mappings(self):
        brand = Brand(id=BrandId("acme"), name="Acme")
        updated = brand.with_changes(resources={"Hosting": {"provider": "Vercel", "loginUrl": "https://vercel.com"}})
        assert updated.resources == {
            "hosting": HostingResource(provider="Vercel", login_url="https://vercel.com")
        }
        assert updated.to_dict()["resources"]["hosting"]["loginUrl"] == "https://vercel.com"

    def test_with_changes_rejects_bad_resources(self):
        brand = Brand(id=BrandId("acme"), name="Acme")
        with pytest.raises(InvalidResourceError):
            brand.with_changes(resources={"dns": {"provider": "Cloudflare", "plan": "Pro"}})
        with pytest.raises(InvalidResourceError):
            brand.with_changes(resources={"dns": HostingResource(provider="AWS")})
        with pytest.raises(InvalidResourceError):
            brand.with_changes(resources={"dns": "Cloudflare"})

    def test_without_resource_removes_key(self):
        brand = Brand(id=BrandId("acme"), name="Acme").with_resource(
            "dns", DnsResource(provider="Cloudflare")
        )
        assert "dns" not in brand.without_resource("dns").resources

    def test_without_missing_resource(self):
        brand = Brand(id=BrandId("acme"), name="Acme")
        with pytest.raises(ResourceNotFoundError):
            brand.without_resource("dns")

    def test_get_resource(self):
        hosting = HostingResource(provider="Vercel")
        brand = Brand(id=BrandId("acme"), name="Acme", resources={"hosting": hosting})
        assert brand.get_resource("hosting") is hosting
        assert brand.has_resource("HOSTING")
        with pytest.raises(ResourceNotFoundError):
            brand.get_resource("analytics")

    def test_counted_resources_ignores_analytics(self, sample_brand_data):
        sample_brand_data["resources"]["analytics"] = {"provider": "Google Analytics"}
        brand = Brand.from_dict(sample_brand_data)
        assert brand.counted_resources() == 2


class TestBrandSerialization:
    def test_from_dict_keeps_stored_id(self, sample_brand_data):
        sample_brand_data["id"] = "legacy-id"
        brand = Brand.from_dict(sample_brand_data)
        assert brand.id.value == "legacy-id"
        assert brand.name == "NexTech"

    def test_to_dict_matches_stored_layout(self, sample_brand_data):
        assert Brand.from_dict(sample_brand_data).to_dict() == sample_brand_data

    def test_from_dict_decodes_variants(self, sample_brand_data):
        brand = Brand.from_dict(sample_brand_data)
        assert isinstance(brand.resources["hosting"], HostingResource)
        assert brand.resources["domain"].auto_renew is True

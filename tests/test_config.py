"""
Unit tests for environment-driven settings.
"""

import pytest


class TestSettings:
    def test_defaults(self, make_settings):
        settings = make_settings()

        assert settings.place_id is None
        assert settings.api_key is None
        assert settings.front_origin == ""
        assert settings.cache_ttl_minutes == 30
        assert settings.cache_ttl_seconds == 1800
        assert settings.port == 10000
        assert settings.places_base_url == "https://places.googleapis.com/v1"
        assert settings.places_timeout_seconds == 10
        assert not settings.is_production

    def test_validate_lists_missing_required_vars(self, make_settings):
        assert make_settings().validate() == ["GOOGLE_PLACE_ID", "GOOGLE_MAPS_API_KEY"]
        assert make_settings(GOOGLE_PLACE_ID="p").validate() == ["GOOGLE_MAPS_API_KEY"]
        assert make_settings(GOOGLE_PLACE_ID="p", GOOGLE_MAPS_API_KEY="k").validate() == []

    def test_overrides(self, make_settings):
        settings = make_settings(
            CACHE_TTL_MINUTES="5",
            PORT="8080",
            FRONT_ORIGIN="https://www.example.com",
            PLACES_API_BASE_URL="https://proxy.local/v1/",
            ENVIRONMENT="production",
        )

        assert settings.cache_ttl_seconds == 300
        assert settings.port == 8080
        assert settings.front_origin == "https://www.example.com"
        assert settings.places_base_url == "https://proxy.local/v1"
        assert settings.is_production

    def test_invalid_numbers_fall_back_to_defaults(self, make_settings):
        settings = make_settings(CACHE_TTL_MINUTES="soon", PORT="")
        assert settings.cache_ttl_minutes == 30
        assert settings.port == 10000

    @pytest.mark.parametrize("raw", ["nan", "inf", "-inf", "-5"])
    def test_non_finite_or_negative_numbers_fall_back_to_defaults(self, make_settings, raw):
        settings = make_settings(PORT=raw, CACHE_TTL_MINUTES=raw, PLACES_TIMEOUT_SECONDS=raw)

        assert settings.port == 10000
        assert settings.cache_ttl_minutes == 30
        assert settings.places_timeout_seconds == 10

    def test_empty_credentials_count_as_missing(self, make_settings):
        settings = make_settings(GOOGLE_PLACE_ID="", GOOGLE_MAPS_API_KEY="")
        assert settings.place_id is None
        assert settings.validate() == ["GOOGLE_PLACE_ID", "GOOGLE_MAPS_API_KEY"]

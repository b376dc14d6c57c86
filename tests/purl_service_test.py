import pytest

from pkgident.services.purl_service import OverrideIdentity
from pkgident.services.purl_service import purl_to_identity


class TestPurlToIdentity:
    """Tests for purl_to_identity function."""

    def test_pypi(self):
        assert purl_to_identity('pkg:pypi/requests@2.31.0') == OverrideIdentity(
            name='requests', version='2.31.0', ecosystem='PyPI',
        )

    def test_maven_joins_namespace_with_colon(self):
        identity = purl_to_identity('pkg:maven/com.google.guava/guava@32.0.0-jre')
        assert identity.name == 'com.google.guava:guava'
        assert identity.ecosystem == 'Maven'

    def test_golang_joins_namespace_with_slash(self):
        identity = purl_to_identity('pkg:golang/github.com/gin-gonic/gin@v1.9.1')
        assert identity.name == 'github.com/gin-gonic/gin'
        assert identity.version == 'v1.9.1'
        assert identity.ecosystem == 'Go'

    def test_npm_scoped(self):
        identity = purl_to_identity('pkg:npm/%40babel/core@7.22.0')
        assert identity.name == '@babel/core'
        assert identity.ecosystem == 'npm'

    def test_cargo(self):
        assert purl_to_identity('pkg:cargo/serde@1.0.0').ecosystem == 'crates.io'

    def test_deb_uses_distro_namespace(self):
        """Test OS purls drop the distro namespace from the name."""
        identity = purl_to_identity('pkg:deb/debian/openssl@3.0.11-1?arch=amd64')
        assert identity == OverrideIdentity(
            name='openssl', version='3.0.11-1', ecosystem='Debian',
        )

    def test_apk(self):
        identity = purl_to_identity('pkg:apk/alpine/busybox@1.36.1-r2')
        assert identity.name == 'busybox'
        assert identity.ecosystem == 'Alpine'

    def test_missing_version(self):
        assert purl_to_identity('pkg:npm/lodash').version == ''

    def test_malformed_purl_raises(self):
        with pytest.raises(ValueError):
            purl_to_identity('lodash@4.17.21')

    def test_unknown_type_raises(self):
        with pytest.raises(ValueError, match='Unsupported purl type'):
            purl_to_identity('pkg:generic/openssl@3.0.0')

    def test_unknown_distro_raises(self):
        with pytest.raises(ValueError, match='Unknown distribution'):
            purl_to_identity('pkg:deb/madeupos/openssl@3.0.0')

"""Shared fixtures for advisory-shield tests."""

import pytest

ACTIONPACK_ADVISORY = """\
---
gem: actionpack
osvdb: 84243
cve: 2012-3424
url: http://www.osvdb.org/show/osvdb/84243
title: |
  Ruby on Rails actionpack HTTP Digest Authentication DoS
date: 2012-07-26
description: |
  Ruby on Rails contains a flaw that may allow a remote denial of service.
  The issue is triggered when an error occurs in DigestAuthentication
  handling of user-supplied input.
cvss_v2: 5.0
unaffected_versions:
  - "~> 2.3.0"
patched_versions:
  - "~> 3.2.10"
  - ">= 3.1.10"
"""

RACK_ADVISORY = """\
---
gem: rack
cve: 2013-0263
ghsa: 7g2v-jj9q-g3rg
url: https://groups.google.com/forum/#!topic/rack-devel/RnQxm6i13B0
title: Timing attack in Rack::Session::Cookie
cvss_v2: 7.5
patched_versions:
  - "~> 1.1.6"
  - "~> 1.2.8"
  - "~> 1.3.10"
  - "~> 1.4.5, >= 1.4.5"
  - ">= 1.5.2"
"""

RACK_OLD_ADVISORY = """\
---
gem: rack
title: Denial of service in multipart parsing
patched_versions:
  - ">= 1.4.1"
"""


@pytest.fixture
def advisory_document():
    """A parsed advisory document with patched and unaffected rules."""
    return {
        "url": "http://www.osvdb.org/show/osvdb/84243",
        "title": "Ruby on Rails actionpack HTTP Digest Authentication DoS",
        "description": "Ruby on Rails contains a flaw that may allow a remote denial of service.",
        "cvss_v2": 5.0,
        "patched_versions": ["~> 3.2.10", ">= 3.1.10"],
        "unaffected_versions": ["~> 2.3.0"],
    }


@pytest.fixture
def database_path(tmp_path):
    """Create an advisory database directory with a few advisories."""
    root = tmp_path / "advisory-db"
    actionpack = root / "gems" / "actionpack"
    rack = root / "gems" / "rack"
    actionpack.mkdir(parents=True)
    rack.mkdir(parents=True)

    (actionpack / "OSVDB-84243.yml").write_text(ACTIONPACK_ADVISORY)
    (rack / "CVE-2013-0263.yml").write_text(RACK_ADVISORY)
    (rack / "CVE-2012-6109.yml").write_text(RACK_OLD_ADVISORY)
    return root


@pytest.fixture
def advisory_file(database_path):
    """Path to the actionpack advisory inside the fixture database."""
    return database_path / "gems" / "actionpack" / "OSVDB-84243.yml"


@pytest.fixture
def reset_logging():
    """Restore the default logging setup after a test configures it."""
    yield
    from advisory_shield.utils.logging import setup_logging

    setup_logging()

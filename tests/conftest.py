"""Shared fixtures: small OpenWRT index and manifest samples."""

import pytest

BASE_INDEX = """\
Package: base-files
Version: 1562-r24106-10cc5fcd00
Depends: libc, netifd, jsonfilter, usign, fstools, fwtool
License: GPL-2.0
Section: base
Architecture: x86_64
Installed-Size: 49152
Filename: base-files_1562-r24106-10cc5fcd00_x86_64.ipk
Size: 50201
SHA256sum: 6f2d0c0d8a9b1f6b5e0c1a0bbf7f3f0a2e1a8d0b7c6c4d3e2f1a0b9c8d7e6f5a
Description:  This package contains a base filesystem and system scripts for OpenWrt.

Package: arptables-nft
Version: 1.8.8-2
Depends: libc, kmod-nft-arp, xtables-nft, kmod-arptables
Alternatives: 300:/usr/sbin/arptables:/usr/sbin/xtables-nft-multi, 300:/usr/sbin/arptables-restore:/usr/sbin/xtables-nft-multi
License: GPL-2.0
Section: net
CPE-ID: cpe:/a:netfilter_core_team:iptables
Architecture: x86_64
Installed-Size: 1024
Filename: arptables-nft_1.8.8-2_x86_64.ipk
Size: 1771
SHA256sum: 0e7f3a6c0c9f1b2a3d4e5f60718293a4b5c6d7e8f90a1b2c3d4e5f60718293a4
Description:  ARP firewall administration tool nft

Package: dnsmasq
Version: 2.90-r4
Provides: dnsmasq-full
Section: net
Description:  It is intended to provide coupled DNS and DHCP service to a LAN.
"""

ADDON_INDEX = """\
Package: 6in4
Version: 28
Section: net
Package: dnsmasq
Version: 2.90-r5
Section: net
"""

MANIFEST = """\
6in4 - 27
base-files - 1562-r24106-10cc5fcd00
dnsmasq - 2.90-r4
my-custom-pkg - 0.1.0-r1
"""


@pytest.fixture
def base_index():
    return BASE_INDEX


@pytest.fixture
def addon_index():
    return ADDON_INDEX


@pytest.fixture
def manifest_text():
    return MANIFEST

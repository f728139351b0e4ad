#!/usr/bin/env python3
"""
Simple example demonstrating basic keagen usage.
"""

import json
import sys

from keagen import Dhcp4, KeaConfig


def main():
    dhcp4 = Dhcp4(7200, ["enp0s1"], "memfile", True, "kea-leases4.csv")

    lan = dhcp4.add_subnet("192.168.50.0/24")
    dhcp4.add_pool(lan, "192.168.50.10", "192.168.50.20")

    dhcp4.add_option_always("domain-name-servers", "192.168.50.1, 8.8.8.8")
    dhcp4.add_option("routers", "192.168.50.1")

    config = KeaConfig(dhcp4)
    result = config.render()
    if not result.complete:
        print(f"Incomplete configuration: {result.diagnostic}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(result.document, indent=2))


if __name__ == "__main__":
    main()

"""IP address preferences."""

from __future__ import annotations

import ipaddress
from typing import Any, Callable

from prefgroups.preferences.base import Preference

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address


def _address_sort_key(address: IPAddress) -> tuple[int, int]:
    return address.version, int(address)


class IPAddressPreference(Preference):
    """An IPv4 or IPv6 address preference.

    Strings are parsed with ``ipaddress.ip_address``; integers are taken as
    packed addresses. Allowed values sort IPv4 before IPv6.
    """

    type_name = "ipAddress"
    json_string = True
    convertible_types = (int,)

    def is_value_type(self, value: Any) -> bool:
        return isinstance(value, (ipaddress.IPv4Address, ipaddress.IPv6Address))

    def sort_key(self) -> Callable[[Any], Any]:
        return _address_sort_key

    def _parse(self, text: str) -> IPAddress:
        return ipaddress.ip_address(text.strip())

    def _convert(self, obj: Any) -> IPAddress:
        if isinstance(obj, bool):
            raise TypeError("A boolean is not an address.")
        return ipaddress.ip_address(obj)

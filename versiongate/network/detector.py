"""Connectivity probe: is any real network interface up?"""

import logging

import psutil

logger = logging.getLogger(__name__)

# Interface name fragments that never carry traffic off the machine
_VIRTUAL_PREFIXES = ('lo', 'loopback')


class NetworkDetector:
    """Cheap offline check used before hitting the gate config endpoint."""

    @staticmethod
    def is_online() -> bool:
        """Return False only when psutil positively reports no usable interface.

        A failed probe counts as online so the fetch (and its own timeout)
        decides.
        """
        try:
            stats = psutil.net_if_stats()
        except Exception as e:
            logger.warning("Network probe failed: %s", e)
            return True

        for iface_name, iface_stats in stats.items():
            if not iface_stats.isup:
                continue
            if iface_name.lower().startswith(_VIRTUAL_PREFIXES):
                continue
            return True

        logger.info("No active network interface")
        return False

"""Known-good values for the Googleplex used across tests."""

from __future__ import annotations


GOOGLE_ADDRESS = "1600 Amphitheatre Parkway, Mountain View, CA"
GOOGLE_LAT = 37.4224082
GOOGLE_LNG = -122.0856086
SUNRISE_TIME = "12:55:17 PM"
SUNSET_TIME = "3:14:28 AM"

"""Feature flags for doublysure.

All features start DISABLED. Read them through the module
(`features.FLAG`) so a monkeypatched value is seen everywhere.
"""

# Resolution receipts: emit a sure_resolution receipt on every yes/no.
# Off by default, gates do not audit their callers.
FEATURE_RESOLUTION_RECEIPTS_ENABLED = False

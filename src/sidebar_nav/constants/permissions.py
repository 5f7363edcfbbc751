"""Permission slugs referenced by the sidebar registry.

Slugs mirror the compiled effective-permission records. Registry entries must
import these constants instead of repeating raw strings so that a renamed slug
breaks loudly at import time.
"""

ORG_READ = "org.read"
ORG_UPDATE = "org.update"

MEMBERS_READ = "members.read"
MEMBERS_MANAGE = "members.manage"

BRANCHES_READ = "branches.read"

TEAMS_MEMBERS_READ = "teams.members.read"

ACCOUNT_PROFILE_READ = "account.profile.read"
ACCOUNT_PREFERENCES_READ = "account.preferences.read"
ACCOUNT_WILDCARD = "account.*"

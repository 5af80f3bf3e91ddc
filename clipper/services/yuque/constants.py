"""Constants for Yuque service."""

# Header carrying the personal access token on every request
AUTH_HEADER = "X-Auth-Token"

# Outline entry kind that participates in the navigable tree.
# Other kinds (LINK, DOC, ...) are dropped while building the outline.
TOC_TITLE_TYPE = "TITLE"

# Separator inside a toc value key: "<node uuid>|<repository id>"
TOC_VALUE_SEPARATOR = "|"

# Move operation discriminator for PUT repos/{id}/toc
MOVE_ACTION_APPEND_BY_DOCS = "appendByDocs"

# Document slugs typed by the user must match this pattern
SLUG_PATTERN = r"^[A-Za-z0-9_\-.]{2,190}$"

# Listing endpoints, formatted with the owner's id
USER_REPOS_PATH = "users/{owner_id}/repos"
GROUP_REPOS_PATH = "groups/{owner_id}/repos"
USER_GROUPS_PATH = "users/{login}/groups"
USER_PATH = "user"
CREATE_DOC_PATH = "repos/{repository_id}/docs"
MOVE_DOC_PATH = "repos/{repository_id}/toc"

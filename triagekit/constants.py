"""Shared names for item states, sort options, providers and hosts."""

OPEN_STATE = "open"
OPENED_STATE = "opened"
CLOSED_STATE = "closed"

UPDATED_SORT_OPTION = "updated"
UPDATED_AT_SORT_OPTION = "updated_at"
CREATED_AT_SORT_OPTION = "created_at"
DESC_DIRECTION_OPTION = "desc"

GITHUB_TOKEN_ENV_VAR = "GITHUB_TOKEN"
GITLAB_TOKEN_ENV_VAR = "GITLAB_TOKEN"

GITHUB_PROVIDER_NAME = "github"
GITLAB_PROVIDER_NAME = "gitlab"

GITLAB_RATE_LIMIT_HEADER = "RateLimit-Limit"
GITLAB_RATE_LIMIT_REMAINING_HEADER = "RateLimit-Remaining"
GITLAB_RATE_LIMIT_RESET_HEADER = "RateLimit-Reset"

GITHUB_PROVIDER_HOST = "github.com"
GITLAB_PROVIDER_HOST = "gitlab.com"
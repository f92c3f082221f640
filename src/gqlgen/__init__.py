# Copyright 2026 gqlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""gqlgen: compile GraphQL schemas into a canonical, target-neutral type model."""

__version__ = "0.1.0"

# Copyright 2026 gqlgen Contributors
# SPDX-License-Identifier: Apache-2.0

# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Exception hierarchy for intent-locale.

Locale resolution itself never raises: malformed or unsupported signals
degrade to "no match" and the resolver falls back to the default locale.
The exceptions below cover the places where failing loudly is correct:

- ConfigurationException: the locale configuration is unusable, detected
  at startup.
- CopyNotFoundException: a copy key is missing from both the requested
  and the default locale's copy table.
"""

from __future__ import annotations


class IntentLocaleException(Exception):
    """Base exception for all intent-locale errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "LOCALE_CONFIG_001").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


class ConfigurationException(IntentLocaleException):
    """Supported-locale set or default locale is invalid."""


class CopyNotFoundException(IntentLocaleException, KeyError):
    """A copy key could not be resolved in any locale."""

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message.
        return str(self.args[0]) if self.args else ""

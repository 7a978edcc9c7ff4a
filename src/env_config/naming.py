# MIT License
#
# Copyright (c) 2025 Democratize Technology
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Mapping of configuration identifiers to environment variable names.

Identifiers in camelCase, PascalCase or snake_case are converted to
SCREAMING_SNAKE_CASE:

    >>> to_env_key("databaseUrl")
    'DATABASE_URL'
    >>> to_env_key("awsS3Bucket")
    'AWS_S3_BUCKET'

The mapping is many-to-one (``databaseURL`` and ``database_url`` give the
same result), so there is no reverse conversion.
"""

import re

# lowercase letter or digit followed by an uppercase letter: apiKey -> api_Key
_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")

# acronym followed by a capitalized word: AWSBucket -> AWS_Bucket
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z0-9]+)")


def to_env_key(identifier: str) -> str:
    """Convert a configuration identifier to its environment variable name."""
    key = _WORD_BOUNDARY.sub(r"\1_\2", identifier)
    key = _ACRONYM_BOUNDARY.sub(r"\1_\2", key)
    return key.upper()

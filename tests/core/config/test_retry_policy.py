# tests/core/config/test_retry_policy.py
"""
Testes da resolução de escopo: política de retry e parâmetros globais.

Os testes asseguram que:
- `retries` é repassado como texto opaco, com default "0"
- `retry.backoff` é convertido em minutos e bucketizado (1, 10, 30)
- valores em branco não são processados
- valores não numéricos geram InvalidRetryConfigError
- chaves reservadas nunca viram parâmetros globais
"""

import pytest

from flowbridge.core.config.errors import InvalidRetryConfigError
from flowbridge.core.config.resolver import (
    RetryPolicy,
    bucketize_retry_interval,
    resolve_global_params,
    resolve_retry_policy,
)
from flowbridge.core.exceptions import ConversionError


@pytest.mark.parametrize(
    "backoff, expected",
    [
        ("0", "0"),
        ("30000", "1"),
        ("60000", "1"),
        ("119999", "1"),
        ("120000", "10"),
        ("300000", "10"),
        ("659999", "10"),
        ("660000", "30"),
        ("1000000", "30"),
    ],
)
def test_backoff_bucketization(backoff, expected):
    assert bucketize_retry_interval(backoff) == expected


@pytest.mark.parametrize(
    "backoff, expected",
    [
        ("+60000", "1"),
        ("-60000", "1"),
        ("-5", "1"),
        ("+300000", "10"),
        (" 120000 ", "10"),
    ],
)
def test_signed_backoff_is_bucketized(backoff, expected):
    assert bucketize_retry_interval(backoff) == expected


@pytest.mark.parametrize("blank", ["", "   "])
def test_blank_backoff_is_left_unprocessed(blank):
    assert bucketize_retry_interval(blank) == blank


@pytest.mark.parametrize("bad", ["soon", "1.5", "60s", "--5", "+"])
def test_invalid_backoff_raises(bad):
    with pytest.raises(InvalidRetryConfigError) as excinfo:
        bucketize_retry_interval(bad)

    assert excinfo.value.details["value"] == bad
    assert isinstance(excinfo.value, ConversionError)


def test_defaults_when_scope_is_empty():
    assert resolve_retry_policy({}) == RetryPolicy(max_retry_times="0", retry_interval="0")


def test_retries_passed_through_as_opaque_text():
    policy = resolve_retry_policy({"retries": "many", "retry.backoff": "300000"})

    assert policy == RetryPolicy(max_retry_times="many", retry_interval="10")


def test_global_params_exclude_reserved_keys():
    scope = {
        "project.name": "legacy",
        "retries": "3",
        "retry.backoff": "60000",
        "env": "prod",
        "base": "${root}/sql",
    }

    params = resolve_global_params(scope)

    assert params == [
        {"prop": "env", "direct": "IN", "type": "VARCHAR", "value": "prod"},
        {"prop": "base", "direct": "IN", "type": "VARCHAR", "value": "${root}/sql"},
    ]


def test_global_params_empty_scope():
    assert resolve_global_params({}) == []

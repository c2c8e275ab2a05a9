import datetime
import pytest

from nsgc.dto.cleanup import CleanupPolicy
from nsgc.dto.namespace import NamespaceDescriptor
from nsgc.services.namespace_filter import is_eligible, skip_reason
from nsgc.test.fakes import NOW, make_namespace


@pytest.mark.parametrize("name", ["kube-system", "kube-public", "kube-node-lease", "default"])
def test_excluded_namespace_is_never_eligible(policy, name):
    ancient = make_namespace(name, age_days=3650)
    assert not is_eligible(ancient, policy, NOW)
    assert skip_reason(ancient, policy, NOW) == "excluded"


def test_exclusion_is_case_sensitive(policy):
    assert is_eligible(make_namespace("Default", age_days=30), policy, NOW)


@pytest.mark.parametrize("value", ["true", "false", ""])
def test_ignore_label_presence_exempts_regardless_of_value(policy, value):
    namespace = make_namespace("demo", age_days=365, labels={"kube-ns-gc.ignore": value})
    assert not is_eligible(namespace, policy, NOW)
    assert skip_reason(namespace, policy, NOW) == "ignore label"


def test_empty_ignore_label_disables_label_check(policy):
    no_label_policy = CleanupPolicy(max_age=policy.max_age, ignore_label="")
    namespace = make_namespace("demo", age_days=10, labels={"": "x", "kube-ns-gc.ignore": "true"})
    assert is_eligible(namespace, no_label_policy, NOW)


@pytest.mark.parametrize("age, expected", [
    (datetime.timedelta(days=10), True),
    (datetime.timedelta(days=7, seconds=1), True),
    (datetime.timedelta(days=7), False),
    (datetime.timedelta(days=6, hours=23), False),
    (datetime.timedelta(0), False),
])
def test_eligible_only_when_strictly_older_than_max_age(policy, age, expected):
    namespace = make_namespace("demo", age_days=age.total_seconds() / 86400)
    assert is_eligible(namespace, policy, NOW) is expected


def test_young_namespace_reason(policy):
    assert skip_reason(make_namespace("demo", age_days=1), policy, NOW) == "not old enough"


def test_other_labels_do_not_exempt(policy):
    namespace = make_namespace("demo", age_days=10, labels={"team": "qa"})
    assert is_eligible(namespace, policy, NOW)


def test_missing_creation_timestamp_is_kept(policy):
    namespace = NamespaceDescriptor("broken", None, {})
    assert not is_eligible(namespace, policy, NOW)
    assert skip_reason(namespace, policy, NOW) == "no creation timestamp"

"""Policy engine — role registry, rule store, and inheritance resolver."""

from dotacl.engine.actions import parse_rule, split_action
from dotacl.engine.concurrency import ReadWriteLock, SynchronizedPolicyEngine
from dotacl.engine.models import Action, RuleKey, RuleSpec, Wildcard
from dotacl.engine.policy import PolicyEngine
from dotacl.engine.registry import RoleRegistry
from dotacl.engine.resolver import Resolver
from dotacl.engine.rules import RuleStore

__all__ = [
    "Action",
    "PolicyEngine",
    "ReadWriteLock",
    "Resolver",
    "RoleRegistry",
    "RuleKey",
    "RuleSpec",
    "RuleStore",
    "SynchronizedPolicyEngine",
    "Wildcard",
    "parse_rule",
    "split_action",
]

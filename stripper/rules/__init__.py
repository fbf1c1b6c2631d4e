from stripper.rules.matcher import matched
from stripper.rules.models import MatchKind, MatchOutcome, Rule, RuleSet
from stripper.rules.parser import compile_rules, read_rules_file

__all__ = [
    "MatchKind",
    "MatchOutcome",
    "Rule",
    "RuleSet",
    "compile_rules",
    "matched",
    "read_rules_file",
]

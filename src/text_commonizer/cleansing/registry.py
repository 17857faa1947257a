"""
Named rule registry and profile discovery.

Every built-in rule is registered under a stable name so that rule lists can
be declared in YAML profiles and applied to record fields without importing
the rule objects themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from threading import RLock
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, TypeVar

import yaml

from text_commonizer.config import get_settings
from text_commonizer.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class RuleCategory(Enum):
    """Rule categories"""

    CONTROL = "control"
    WHITESPACE = "whitespace"
    WIDTH = "width"
    KANA = "kana"
    CUSTOM = "custom"


@dataclass
class CleansingRule:
    """Registered rule metadata"""

    name: str
    category: RuleCategory
    func: Callable[[Optional[str]], Optional[str]]
    description: str
    priority: int = 0

    def __post_init__(self):
        if not callable(self.func):
            raise ValueError(f"Rule {self.name} must have a callable function")
        if self.priority is None or self.priority < 0:
            raise ValueError(f"Rule {self.name} must have a non-negative priority")


class CleansingRegistry:
    """
    Process-wide registry of named text rules.

    Holds the rules by name and the named profiles (lists of rule names) read
    from ``normalization_profiles.yml``.
    """

    _instance: Optional["CleansingRegistry"] = None
    _rules: Dict[str, CleansingRule] = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if getattr(self, "_initialized", False):
            return

        self._config_lock = RLock()
        self._default_config_path = (
            Path(__file__).resolve().parent / "settings" / "normalization_profiles.yml"
        )
        self._config_path_override: Optional[Path] = None
        self._loaded_path: Optional[Path] = None
        self._config_mtime: Optional[float] = None
        self._profile_config: Dict[str, Any] = {
            "profiles": {},
            "default_rules": [],
        }
        self._initialized = True

    # --- Rule registration -----------------------------------------------------
    def register(self, rule: CleansingRule) -> None:
        """
        Register a rule under its name.

        Args:
            rule: Rule metadata; an existing rule with the same name is replaced
        """
        if rule.name in self._rules:
            logger.warning("cleansing_registry.rule_overridden", rule=rule.name)

        self._rules[rule.name] = rule
        logger.debug(
            "cleansing_registry.rule_registered",
            rule=rule.name,
            category=rule.category.value,
            priority=rule.priority,
        )

    def unregister(self, name: str) -> Optional[CleansingRule]:
        return self._rules.pop(name, None)

    def get_rule(self, name: str) -> Optional[CleansingRule]:
        return self._rules.get(name)

    def find_by_category(self, category: RuleCategory) -> List[CleansingRule]:
        return [rule for rule in self._rules.values() if rule.category == category]

    def list_all_rules(self) -> List[CleansingRule]:
        return list(self._rules.values())

    def get_statistics(self) -> Dict[str, Any]:
        rules_by_category: Dict[str, int] = {}

        for category in RuleCategory:
            count = len([r for r in self._rules.values() if r.category == category])
            rules_by_category[category.value] = count

        return {
            "total_rules": len(self._rules),
            "rules_by_category": rules_by_category,
        }

    # --- Rule execution helpers -------------------------------------------------
    def _require(self, rule_name: str) -> CleansingRule:
        rule = self.get_rule(rule_name)
        if not rule:
            available = sorted(self._rules.keys())
            raise ValueError(
                f"Cleansing rule '{rule_name}' not registered. "
                f"Available: {available}"
            )
        return rule

    def apply_rule(self, text: Optional[str], rule_name: str) -> Optional[str]:
        """Apply a single named rule"""
        return self._require(rule_name).func(text)

    def apply_rules(
        self, text: Optional[str], rule_names: Sequence[str]
    ) -> Optional[str]:
        """
        Apply named rules in ascending priority order.

        Rules with equal priority keep the order in which they are listed.

        Args:
            text: Input text; None is returned unchanged
            rule_names: Names of registered rules
        """
        rules = [self._require(name) for name in rule_names]
        if text is None:
            return None

        result: Optional[str] = text
        for rule in sorted(rules, key=lambda r: r.priority):
            result = rule.func(result)
        return result

    # --- Profiles --------------------------------------------------------------
    @property
    def config_path(self) -> Path:
        if self._config_path_override is not None:
            return self._config_path_override
        configured = get_settings().profiles_config
        if configured:
            return Path(configured).expanduser()
        return self._default_config_path

    def set_config_path(self, path: Optional[Path]) -> None:
        """Point the registry at another profile file (None restores the default)."""
        with self._config_lock:
            self._config_path_override = Path(path) if path is not None else None
            self._config_mtime = None

    def get_profile_rules(self, profile: str) -> List[str]:
        """Rule names of ``profile``; unknown profiles fall back to default_rules."""
        self._ensure_config_loaded()
        profiles: Dict[str, List[str]] = self._profile_config.get("profiles", {})
        if profile in profiles:
            return list(profiles[profile])

        return list(self._profile_config.get("default_rules", []))

    def list_profiles(self) -> List[str]:
        self._ensure_config_loaded()
        return sorted(self._profile_config.get("profiles", {}))

    def apply_profile(self, text: Optional[str], profile: str) -> Optional[str]:
        return self.apply_rules(text, self.get_profile_rules(profile))

    def reload_profiles(self) -> None:
        """Force a reload of the YAML profiles (tests or hot reload)."""
        with self._config_lock:
            self._config_mtime = None
        self._ensure_config_loaded()

    def _ensure_config_loaded(self) -> None:
        with self._config_lock:
            path = self.config_path
            current_mtime = path.stat().st_mtime if path.exists() else None
            if (
                self._config_mtime is not None
                and current_mtime == self._config_mtime
                and path == self._loaded_path
            ):
                return

            if not path.exists():
                logger.debug("cleansing_registry.profiles_missing", path=str(path))
                self._profile_config = {"profiles": {}, "default_rules": []}
                self._config_mtime = None
                self._loaded_path = None
                return

            with path.open("r", encoding="utf-8") as handle:
                try:
                    parsed = yaml.safe_load(handle) or {}
                except yaml.YAMLError as exc:
                    raise ValueError(f"Invalid profile file {path}: {exc}") from exc

            if not isinstance(parsed, dict):
                raise ValueError(f"Profile file {path} must contain a mapping")

            profiles = parsed.get("profiles") or {}
            if not isinstance(profiles, dict):
                raise ValueError(
                    "'profiles' section in normalization_profiles.yml must be a mapping"
                )

            default_rules: Iterable[str] = parsed.get("default_rules") or []

            self._validate_profiles(profiles, default_rules)
            self._profile_config = {
                "profiles": {name: list(rules) for name, rules in profiles.items()},
                "default_rules": list(default_rules),
            }
            self._config_mtime = current_mtime
            self._loaded_path = path
            logger.info(
                "cleansing_registry.profiles_loaded",
                path=str(path),
                profiles=sorted(profiles),
            )

    def _validate_profiles(
        self,
        profiles: Dict[str, Sequence[str]],
        default_rules: Iterable[str],
    ) -> None:
        for profile, rules in profiles.items():
            if not isinstance(rules, list):
                raise ValueError(f"Profile '{profile}' must be a list of rule names")
            self._validate_rule_names(rules, profile)

        self._validate_rule_names(default_rules, "default_rules")

    def _validate_rule_names(self, names: Iterable[Any], label: str) -> None:
        for name in names:
            if not isinstance(name, str):
                raise ValueError(
                    f"Invalid rule name in '{label}'. Expected string, got {type(name)}"
                )
            if name not in self._rules:
                raise ValueError(
                    f"Rule '{name}' referenced in '{label}' is not registered"
                )


# Global registry instance
registry = CleansingRegistry()


def rule(name: str, category: RuleCategory, description: str, priority: int = 0):
    """
    Decorator registering a text function as a named rule.

    Example:
        @rule(
            name="strip_bom",
            category=RuleCategory.CUSTOM,
            description="Remove byte order marks",
        )
        def strip_bom(text):
            return text.replace("\\ufeff", "") if text else text
    """

    def decorator(func: Callable) -> Callable:
        rule_obj = CleansingRule(
            name=name,
            category=category,
            func=func,
            description=description,
            priority=priority,
        )
        registry.register(rule_obj)
        func._cleansing_rule = rule_obj  # type: ignore[attr-defined]
        return func

    return decorator


def register_rule(name: str, category: RuleCategory, description: str, text_rule: T) -> T:
    """
    Register a rule object (anything with ``replace_all`` and ``priority``).

    Returns the rule object unchanged so module constants can be declared and
    registered in one statement.
    """
    registry.register(
        CleansingRule(
            name=name,
            category=category,
            func=text_rule.replace_all,  # type: ignore[attr-defined]
            description=description,
            priority=text_rule.priority,  # type: ignore[attr-defined]
        )
    )
    return text_rule


def get_cleansing_registry() -> CleansingRegistry:
    return registry

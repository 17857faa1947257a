"""
Text Cleansing Engine for records.

Thin wrapper around the cleansing registry that applies a named
normalization profile to the string fields of dict records, with support
for:
- Per-field results (original, cleansed, rules applied)
- Batch record processing
- Cleansing status tracking
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from text_commonizer.cleansing.registry import CleansingRegistry
from text_commonizer.cleansing.rules import cjk_rules, whitespace_rules  # noqa: F401
from text_commonizer.cleansing import translators  # noqa: F401
from text_commonizer.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class FieldCleansingResult:
    """
    Result of cleansing a single field.

    Attributes:
        field_name: Name of the field that was cleansed.
        original_value: Original value before cleansing.
        cleansed_value: Value after cleansing.
        rules_applied: List of rule names that were applied.
        success: Whether cleansing succeeded without errors.
        error: Error message if cleansing failed.
    """

    field_name: str
    original_value: Any
    cleansed_value: Any
    rules_applied: List[str]
    success: bool = True
    error: Optional[str] = None

    @property
    def changed(self) -> bool:
        return self.cleansed_value != self.original_value


@dataclass
class RecordCleansingResult:
    """
    Result of cleansing an entire record.

    Attributes:
        profile: Profile name (e.g., "optimize").
        fields_cleansed: Number of fields successfully cleansed.
        fields_failed: Number of fields that failed cleansing.
        field_results: Detailed results for each field.
    """

    profile: str
    fields_cleansed: int = 0
    fields_failed: int = 0
    field_results: List[FieldCleansingResult] = field(default_factory=list)

    @property
    def cleansing_status(self) -> Dict[str, Any]:
        """JSON-compatible summary of the record outcome."""
        return {
            "profile": self.profile,
            "fields_cleansed": self.fields_cleansed,
            "fields_failed": self.fields_failed,
            "fields_changed": [
                result.field_name
                for result in self.field_results
                if result.success and result.changed
            ],
            "failed_fields": [
                {
                    "field": result.field_name,
                    "error": result.error,
                }
                for result in self.field_results
                if not result.success
            ],
        }


class TextCleansingEngine:
    """
    High-level interface for normalizing the text fields of records.

    Example:
        >>> engine = TextCleansingEngine()
        >>> record = {"title": "  Ｈｅｌｌｏ　Ｗｏｒｌｄ  ", "count": 3}
        >>> result = engine.cleanse_record("cjk_width", record)
        >>> record["title"]
        'Hello World'
    """

    def __init__(self, registry: Optional[CleansingRegistry] = None) -> None:
        """
        Initialize TextCleansingEngine.

        Args:
            registry: Optional CleansingRegistry instance. If None, uses singleton.
        """
        self.registry = registry or CleansingRegistry()

    def cleanse_field(
        self,
        profile: str,
        field_name: str,
        value: Any,
    ) -> FieldCleansingResult:
        """
        Normalize a single field value with the rules of ``profile``.

        Non-string values (including None) are passed through untouched.

        Args:
            profile: Profile name (e.g., "optimize").
            field_name: Field name, used for reporting.
            value: Original field value.

        Returns:
            FieldCleansingResult with cleansing outcome.
        """
        if not isinstance(value, str):
            return FieldCleansingResult(
                field_name=field_name,
                original_value=value,
                cleansed_value=value,
                rules_applied=[],
                success=True,
            )

        try:
            rule_names = self.registry.get_profile_rules(profile)
            cleansed_value = self.registry.apply_rules(value, rule_names)

            return FieldCleansingResult(
                field_name=field_name,
                original_value=value,
                cleansed_value=cleansed_value,
                rules_applied=rule_names,
                success=True,
            )

        except ValueError as e:
            logger.warning(
                "text_cleansing_engine.field_cleansing_failed",
                profile=profile,
                field=field_name,
                error=str(e),
            )

            return FieldCleansingResult(
                field_name=field_name,
                original_value=value,
                cleansed_value=value,
                rules_applied=[],
                success=False,
                error=str(e),
            )

    def cleanse_record(
        self,
        profile: str,
        record: Dict[str, Any],
        fields: Optional[List[str]] = None,
    ) -> RecordCleansingResult:
        """
        Normalize the fields of a record in place.

        Args:
            profile: Profile name.
            record: Record dict with field names as keys.
            fields: Optional list of fields to cleanse. If None, cleanses all fields.

        Returns:
            RecordCleansingResult with cleansing outcomes and status.
        """
        result = RecordCleansingResult(profile=profile)

        fields_to_cleanse = fields if fields is not None else list(record.keys())

        for field_name in fields_to_cleanse:
            if field_name not in record:
                continue

            field_result = self.cleanse_field(profile, field_name, record[field_name])
            result.field_results.append(field_result)
            record[field_name] = field_result.cleansed_value

            if field_result.success:
                result.fields_cleansed += 1
            else:
                result.fields_failed += 1

        logger.debug(
            "text_cleansing_engine.record_cleansed",
            profile=profile,
            fields_cleansed=result.fields_cleansed,
            fields_failed=result.fields_failed,
        )

        return result

    def cleanse_batch(
        self,
        profile: str,
        records: List[Dict[str, Any]],
        fields: Optional[List[str]] = None,
    ) -> List[RecordCleansingResult]:
        """
        Normalize multiple records in batch.

        Args:
            profile: Profile name.
            records: List of record dicts.
            fields: Optional list of fields to cleanse in each record.

        Returns:
            List of RecordCleansingResult, one per record.
        """
        results = [self.cleanse_record(profile, record, fields) for record in records]

        logger.info(
            "text_cleansing_engine.batch_cleansed",
            profile=profile,
            records_count=len(records),
            total_fields_cleansed=sum(r.fields_cleansed for r in results),
            total_fields_failed=sum(r.fields_failed for r in results),
        )

        return results

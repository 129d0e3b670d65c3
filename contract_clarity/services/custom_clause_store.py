# DEPENDENCIES
import json
import time
import uuid
from typing import Any
from typing import Dict
from typing import List
from pathlib import Path
from typing import Optional
from contract_clarity.utils.logger import log_info
from contract_clarity.utils.logger import log_error
from contract_clarity.config.settings import settings
from contract_clarity.config.clause_rules import Severity
from contract_clarity.exceptions import CustomClauseStoreError
from contract_clarity.services.data_models import CustomClauseRule


class CustomClauseStore:
    """
    JSON-file store for user-defined clause rules

    The analysis engine never reads this store itself; callers pass
    `store.list()` into `ContractAnalyzer.analyze`
    """
    EDITABLE_FIELDS = ("name", "keywords", "category", "description", "risk_level")


    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path or settings.CUSTOM_CLAUSES_FILE)


    def list(self) -> List[CustomClauseRule]:
        """
        All stored rules, in insertion order; a missing file means no rules
        """
        if not self.path.exists():
            return []

        try:
            payload = json.loads(self.path.read_text(encoding = "utf-8") or "[]")

        except (OSError, json.JSONDecodeError) as e:
            log_error(e, context = {"component": "CustomClauseStore", "operation": "list", "path": str(self.path)})
            raise CustomClauseStoreError(f"Unable to read custom clauses from {self.path}") from e

        if not isinstance(payload, list):
            raise CustomClauseStoreError(f"Custom clause file {self.path} does not contain a list")

        try:
            return [CustomClauseRule.from_dict(item) for item in payload]

        except (KeyError, TypeError, AttributeError) as e:
            log_error(e, context = {"component": "CustomClauseStore", "operation": "list", "path": str(self.path)})
            raise CustomClauseStoreError(f"Custom clause file {self.path} contains a malformed rule") from e


    def add(self, name: str, keywords: List[str], category: str = "custom", description: str = "", risk_level: Optional[Severity] = Severity.MEDIUM) -> CustomClauseRule:
        """
        Store a new rule with a fresh id and creation time
        """
        rule  = CustomClauseRule(name        = name,
                                 keywords    = list(keywords),
                                 category    = category or "custom",
                                 description = description or "",
                                 risk_level  = risk_level,
                                 id          = uuid.uuid4().hex,
                                 created_at  = int(time.time() * 1000),
                                )

        rules = self.list()
        rules.append(rule)
        self._save(rules)

        log_info("Custom clause added", id = rule.id, name = rule.name)

        return rule


    def update(self, rule_id: str, **updates: Any) -> Optional[CustomClauseRule]:
        """
        Update editable fields of a rule; None when the id is unknown
        """
        unknown = set(updates) - set(self.EDITABLE_FIELDS)

        if unknown:
            raise ValueError(f"Fields cannot be updated: {sorted(unknown)}")

        rules = self.list()

        for rule in rules:
            if (rule.id == rule_id):
                for field_name, value in updates.items():
                    setattr(rule, field_name, value)

                self._save(rules)

                return rule

        return None


    def delete(self, rule_id: str) -> bool:
        """
        Remove a rule; False when the id is unknown
        """
        rules     = self.list()
        remaining = [rule for rule in rules if (rule.id != rule_id)]

        if (len(remaining) == len(rules)):
            return False

        self._save(remaining)

        return True


    def export_json(self) -> str:
        return json.dumps([rule.to_dict() for rule in self.list()], indent = 2)


    def import_json(self, json_string: str) -> int:
        """
        Append rules from an exported JSON array

        Items without a `name` or without a list of `keywords` are skipped;
        missing category, description and risk level fall back to
        "custom", "" and medium

        Returns:
        --------
            { int } : Number of rules imported
        """
        try:
            imported = json.loads(json_string)

        except json.JSONDecodeError as e:
            raise CustomClauseStoreError("Failed to parse JSON") from e

        if not isinstance(imported, list):
            raise CustomClauseStoreError("Invalid format: expected an array of clauses")

        rules = self.list()
        count = 0

        for item in imported:
            if not isinstance(item, dict) or not item.get("name") or not isinstance(item.get("keywords"), list):
                continue

            rule            = CustomClauseRule.from_dict({**item, "riskLevel": item.get("riskLevel") or Severity.MEDIUM.value})
            rule.id         = uuid.uuid4().hex
            rule.created_at = int(time.time() * 1000)

            rules.append(rule)
            count += 1

        self._save(rules)

        log_info("Custom clauses imported", count = count)

        return count


    def clear(self):
        self._save([])


    def _save(self, rules: List[CustomClauseRule]):
        payload: List[Dict[str, Any]] = [rule.to_dict() for rule in rules]

        try:
            self.path.parent.mkdir(parents = True, exist_ok = True)
            self.path.write_text(json.dumps(payload, indent = 2), encoding = "utf-8")

        except OSError as e:
            log_error(e, context = {"component": "CustomClauseStore", "operation": "save", "path": str(self.path)})
            raise CustomClauseStoreError(f"Unable to write custom clauses to {self.path}") from e

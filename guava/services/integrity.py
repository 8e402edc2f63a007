"""
Verification de coherence entre le catalogue et la racine des assets.

Lecture seule : le catalogue et les fichiers ne sont jamais modifies.
Deux incoherences sont detectees :
- asset manquant : un contenu catalogue dont le hash n'a pas de fichier
- asset orphelin : un fichier que aucun contenu ne reference
"""

import json
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from loguru import logger

from guava.core.errors import AssetNotFoundError
from guava.core.ports.file_system import IAssetStore
from guava.core.ports.repositories import IContentRepository


class IssueType(str, Enum):
    MISSING_ASSET = "missing_asset"
    ORPHAN_ASSET = "orphan_asset"


@dataclass(frozen=True)
class IntegrityIssue:
    """Incoherence sur un asset (content_id vide pour un orphelin)."""

    type: IssueType
    hash: str
    content_id: str = ""

    def to_dict(self) -> dict:
        return {"type": self.type.value, "hash": self.hash, "content_id": self.content_id}


@dataclass
class IntegrityReport:
    """Resultat d'une verification."""

    issues: list[IntegrityIssue] = field(default_factory=list)
    checked_contents: int = 0
    checked_at: datetime = field(default_factory=datetime.now)

    def _of_type(self, issue_type: IssueType) -> list[IntegrityIssue]:
        return [issue for issue in self.issues if issue.type is issue_type]

    @property
    def has_issues(self) -> bool:
        return bool(self.issues)

    @property
    def missing_assets(self) -> list[IntegrityIssue]:
        return self._of_type(IssueType.MISSING_ASSET)

    @property
    def orphan_assets(self) -> list[IntegrityIssue]:
        return self._of_type(IssueType.ORPHAN_ASSET)

    def to_dict(self) -> dict:
        return {
            "checked_at": self.checked_at.isoformat(),
            "checked_contents": self.checked_contents,
            "has_issues": self.has_issues,
            "summary": {
                "total": len(self.issues),
                "missing_assets": len(self.missing_assets),
                "orphan_assets": len(self.orphan_assets),
            },
            "issues": [issue.to_dict() for issue in self.issues],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    def format_text(self) -> str:
        """Rendu texte pour la commande check."""
        lines = [
            f"Verification du {self.checked_at:%Y-%m-%d %H:%M:%S}",
            f"{self.checked_contents} contenu(s) catalogue(s)",
            "",
        ]
        if not self.has_issues:
            lines.append("Aucune incoherence detectee.")
            return "\n".join(lines)

        missing = self.missing_assets
        if missing:
            lines.append(f"Assets manquants : {len(missing)}")
            lines.extend(f"  {issue.content_id} -> {issue.hash}" for issue in missing)

        orphans = self.orphan_assets
        if orphans:
            if missing:
                lines.append("")
            lines.append(f"Assets orphelins : {len(orphans)}")
            lines.extend(f"  {issue.hash}" for issue in orphans)

        return "\n".join(lines)


class IntegrityChecker:
    """Compare les hashes du catalogue aux fichiers de la racine des assets."""

    def __init__(self, repository: IContentRepository, asset_store: IAssetStore) -> None:
        self._repository = repository
        self._asset_store = asset_store

    def check(self) -> IntegrityReport:
        """
        Parcourt le catalogue puis la racine des assets.

        Raises :
            BackendError : Si le catalogue ne peut pas etre parcouru
        """
        report = IntegrityReport()
        referenced: set[str] = set()

        for record in self._repository.iter_all():
            report.checked_contents += 1
            referenced.add(record.hash)
            try:
                self._asset_store.locate(record.hash)
            except AssetNotFoundError:
                report.issues.append(
                    IntegrityIssue(IssueType.MISSING_ASSET, record.hash, record.content_id)
                )

        report.issues.extend(
            IntegrityIssue(IssueType.ORPHAN_ASSET, file_hash)
            for file_hash in sorted(self._asset_store.iter_hashes())
            if file_hash not in referenced
        )

        logger.info(
            "Verification d'integrite terminee",
            contents=report.checked_contents,
            missing=len(report.missing_assets),
            orphans=len(report.orphan_assets),
        )
        return report

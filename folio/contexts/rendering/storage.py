"""
Resume storage collaborator.

The renderer only needs two lookups: a resume by id for its owner, and a
published resume by public slug. ``ResumeStore`` names that contract;
``InMemoryResumeStore`` implements it over records loaded up front (one YAML
file per resume).
"""

from pathlib import Path
from typing import Dict, Iterable, List, Optional

from omegaconf import OmegaConf
from typing_extensions import Protocol

from folio.contexts.compiling.resume_data_structure import ResumeRecord
from folio.contexts.rendering.exceptions import ResumeForbiddenError, ResumeNotFoundError
from folio.contexts.rendering.logger import log_store_loaded


class ResumeStore(Protocol):
    """Read-only resume lookups used by the renderer."""

    def find_owned(self, resume_id: str, user_id: str) -> ResumeRecord:
        """
        Resume by id, checked against its owner.

        Raises:
            ResumeNotFoundError: No resume with this id
            ResumeForbiddenError: The resume belongs to another user
        """
        ...

    def find_public(self, slug: str) -> ResumeRecord:
        """
        Published resume by slug.

        Raises:
            ResumeNotFoundError: No resume with this slug, or it is not public
        """
        ...


class InMemoryResumeStore:
    """
    ResumeStore over an in-memory collection of records.

    Example:
        >>> store = InMemoryResumeStore.from_yaml_dir(Path("data/resumes"))
        >>> store.find_public("jane-doe").id
        'r-1'
    """

    def __init__(self, resumes: Optional[Iterable[ResumeRecord]] = None):
        self._resumes: Dict[str, ResumeRecord] = {}
        for resume in resumes or []:
            self.add(resume)

    def add(self, resume: ResumeRecord) -> None:
        """Add or replace a resume, keyed by id."""
        self._resumes[resume.id] = resume

    def list_ids(self) -> List[str]:
        return sorted(self._resumes)

    def find_owned(self, resume_id: str, user_id: str) -> ResumeRecord:
        resume = self._resumes.get(resume_id)
        if resume is None:
            raise ResumeNotFoundError(resume_id=resume_id)
        if resume.user_id != user_id:
            raise ResumeForbiddenError(resume_id, user_id)
        return resume

    def find_public(self, slug: str) -> ResumeRecord:
        for resume in self._resumes.values():
            if resume.slug == slug and resume.is_public:
                return resume
        raise ResumeNotFoundError(slug=slug)

    @classmethod
    def from_yaml_dir(cls, path: Path) -> "InMemoryResumeStore":
        """
        Load every *.yaml / *.yml file in a directory as one resume.

        Args:
            path: Directory of resume YAML files

        Returns:
            Store holding the loaded resumes

        Raises:
            FileNotFoundError: If path is not a directory
        """
        path = Path(path)
        if not path.is_dir():
            raise FileNotFoundError(f"Resume store directory not found: {path}")

        yaml_files = sorted(list(path.glob("*.yaml")) + list(path.glob("*.yml")))
        store = cls()
        for yaml_file in yaml_files:
            data = OmegaConf.to_container(OmegaConf.load(yaml_file), resolve=True)
            store.add(ResumeRecord.from_dict(data))

        log_store_loaded(path, len(yaml_files))
        return store

"""Bulk resume ranking: an in-memory, process-lifetime candidate collection.

Each uploaded resume is scored against an optional job description with
a lighter variant of the concept matcher, then the whole collection is
re-sorted by match percentage (descending, stable, so equal scores keep
upload order). The collection and the selection set are only mutated
from request handlers on the event loop, so no locking is needed.
"""

import asyncio
import itertools
import logging
from dataclasses import dataclass
from typing import Callable

from models.schemas.candidate import Candidate, ExtractionFailure, PreparedEmail
from services import contact_info
from services.ats_scorer import ats_score
from services.concept_extractor import extract_ranker_concepts
from services.scoring import clamp_score, round_half_up
from services.similarity import is_close
from services.skill_extractor import (
    RANKER_VOCABULARY,
    extract_skills,
    missing_technical,
    present_technical,
)
from services.text_extractor import (
    ExtractionError,
    NoTextFoundError,
    UnsupportedFileTypeError,
    extract_text,
)

logger = logging.getLogger(__name__)

# Score used when there is nothing to compare against
NEUTRAL_MATCH = 50
CONCEPT_WEIGHT = 0.6
KEYWORD_WEIGHT = 0.4
MIN_KEYWORD_LENGTH = 5
KEYWORD_STOPWORDS = frozenset({"with", "from", "must", "have", "that", "your", "will", "able"})

RANK_BADGES: tuple[tuple[int, str], ...] = (
    (80, "Excellent"),
    (60, "Good"),
    (40, "Fair"),
)


class CandidateNotFoundError(KeyError):
    pass


class NoSelectionError(ValueError):
    pass


@dataclass
class UploadedDocument:
    file_name: str
    content: bytes
    mime_type: str = ""


def rank_label(match_percentage: int) -> str:
    for threshold, label in RANK_BADGES:
        if match_percentage >= threshold:
            return label
    return "Poor"


def _job_keywords(job_lower: str) -> list[str]:
    return [
        w for w in job_lower.split()
        if len(w) >= MIN_KEYWORD_LENGTH and w not in KEYWORD_STOPWORDS
    ]


def calculate_match(resume_text: str, job_description: str) -> int:
    """Blend family-level concept coverage with raw keyword overlap.

    Without a job description every resume gets the neutral score.
    Concepts count 100 when the resume has the same family, 60 when a
    resume family is within fuzzy distance. When the job description
    names no families, keyword overlap alone decides.
    """
    if not job_description or not job_description.strip():
        return NEUTRAL_MATCH

    resume_lower = resume_text.lower()
    resume_concepts = extract_ranker_concepts(resume_text)
    job_concepts = extract_ranker_concepts(job_description)

    concept_total = 0
    for concept in job_concepts:
        if concept in resume_concepts:
            concept_total += 100
        elif any(is_close(concept, c) for c in resume_concepts):
            concept_total += 60

    keywords = _job_keywords(job_description.lower())
    keyword_hits = sum(1 for kw in keywords if kw in resume_lower)

    if job_concepts:
        concept_score = concept_total / (len(job_concepts) * 100) * 100
        keyword_score = keyword_hits / len(keywords) * 100 if keywords else 0
        final = concept_score * CONCEPT_WEIGHT + keyword_score * KEYWORD_WEIGHT
    elif keywords:
        final = keyword_hits / len(keywords) * 100
    else:
        final = NEUTRAL_MATCH

    return clamp_score(round_half_up(final))


class CandidateRanker:
    def __init__(
        self,
        job_description: str = "",
        extractor: Callable[[bytes, str, str], str] = extract_text,
    ):
        self.job_description = job_description
        self._extractor = extractor
        self._candidates: list[Candidate] = []
        self._selected: set[str] = set()
        self._ids = itertools.count(1)

    # --- Read access ---

    @property
    def candidates(self) -> list[Candidate]:
        return list(self._candidates)

    @property
    def selected(self) -> list[str]:
        """Selected ids, in ranking order."""
        return [c.id for c in self._candidates if c.id in self._selected]

    def get(self, candidate_id: str) -> Candidate:
        for candidate in self._candidates:
            if candidate.id == candidate_id:
                return candidate
        raise CandidateNotFoundError(candidate_id)

    def __len__(self) -> int:
        return len(self._candidates)

    # --- Scoring ---

    def _next_id(self) -> str:
        return f"cand-{next(self._ids):05d}"

    def build_candidate(self, file_name: str, resume_text: str) -> Candidate:
        job = self.job_description
        resume_skills = extract_skills(resume_text, RANKER_VOCABULARY)
        job_skills = extract_skills(job, RANKER_VOCABULARY)
        match = calculate_match(resume_text, job)
        contact = contact_info.extract_contact_info(resume_text)

        return Candidate(
            id=self._next_id(),
            file_name=file_name,
            resume_text=resume_text,
            email=contact["email"],
            phone=contact["phone"],
            name=contact["name"] or "Unknown",
            match_percentage=match,
            ats_score=ats_score(resume_text),
            resume_skills=resume_skills,
            job_skills=job_skills,
            missing_skills=missing_technical(resume_skills, job_skills),
            present_skills=present_technical(resume_skills, job_skills),
            rank_label=rank_label(match),
        )

    def _sort(self) -> None:
        self._candidates.sort(key=lambda c: c.match_percentage, reverse=True)

    # --- Mutation ---

    def add_texts(self, items: list[tuple[str, str]]) -> list[Candidate]:
        """Add already-extracted resumes as one batch."""
        added = [self.build_candidate(name, text) for name, text in items if text.strip()]
        self._candidates.extend(added)
        self._sort()
        return added

    def add_text(self, file_name: str, resume_text: str) -> Candidate | None:
        added = self.add_texts([(file_name, resume_text)])
        return added[0] if added else None

    async def ingest(
        self,
        documents: list[UploadedDocument],
        max_bytes: int | None = None,
    ) -> tuple[list[Candidate], list[ExtractionFailure]]:
        """Extract and rank a batch of uploads, one file at a time.

        A file that fails extraction is reported and skipped; the rest of
        the batch still goes through.
        """
        extracted: list[tuple[str, str]] = []
        failures: list[ExtractionFailure] = []

        for doc in documents:
            if max_bytes is not None and len(doc.content) > max_bytes:
                failures.append(ExtractionFailure(
                    file_name=doc.file_name, reason="too_large",
                    detail=f"File exceeds {max_bytes // (1024 * 1024)}MB",
                ))
                continue
            try:
                text = await asyncio.to_thread(
                    self._extractor, doc.content, doc.mime_type, doc.file_name
                )
            except NoTextFoundError as e:
                failures.append(ExtractionFailure(file_name=doc.file_name, reason="no_text", detail=str(e)))
                continue
            except UnsupportedFileTypeError as e:
                failures.append(ExtractionFailure(file_name=doc.file_name, reason="unsupported", detail=str(e)))
                continue
            except ExtractionError as e:
                failures.append(ExtractionFailure(file_name=doc.file_name, reason="error", detail=str(e)))
                continue
            extracted.append((doc.file_name, text))

        added = self.add_texts(extracted)
        if failures:
            logger.warning(
                "Ranker batch: %d added, %d failed (%s)",
                len(added), len(failures), ", ".join(f.file_name for f in failures),
            )
        else:
            logger.info("Ranker batch: %d added", len(added))
        return added, failures

    def delete(self, candidate_id: str) -> None:
        candidate = self.get(candidate_id)
        self._candidates.remove(candidate)
        self._selected.discard(candidate_id)

    def clear(self) -> None:
        self._candidates.clear()
        self._selected.clear()

    def toggle_selection(self, candidate_id: str) -> bool:
        """Flip selection for a candidate; returns the new state."""
        self.get(candidate_id)
        if candidate_id in self._selected:
            self._selected.remove(candidate_id)
            return False
        self._selected.add(candidate_id)
        return True

    def select_all(self) -> None:
        self._selected = {c.id for c in self._candidates}

    def clear_selection(self) -> None:
        self._selected.clear()

    def send_emails(self, subject: str, message: str) -> tuple[list[PreparedEmail], int]:
        """Prepare (but never send) an email for each selected candidate.

        Candidates without an email address are counted but get no message.
        Returns the prepared messages and the number of selected candidates;
        the selection is cleared afterwards.
        """
        selected = [c for c in self._candidates if c.id in self._selected]
        if not selected:
            raise NoSelectionError("Please select candidates to send emails")

        prepared = []
        for candidate in selected:
            if not candidate.email:
                continue
            logger.info("Email prepared for %s (%s): %s", candidate.name, candidate.email, subject)
            prepared.append(PreparedEmail(
                candidate_id=candidate.id,
                name=candidate.name,
                to=candidate.email,
                subject=subject,
                message=message,
            ))

        self._selected.clear()
        return prepared, len(selected)

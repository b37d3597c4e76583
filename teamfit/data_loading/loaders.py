"""
Data loading functions for the compatibility engine.

This module reads profile and project snapshots from JSON documents into
typed records. No scoring is done here; the engine receives the loaded
records as explicit arguments.

Document layout:
    {
        "profiles": {freelancer_id: profile_record, ...},
        "projects": {project_id: project_record, ...},
        "applications": {project_id: [freelancer_id, ...], ...}
    }

Records accept the web application's camelCase keys as well as snake_case.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Any

from ..matching.schema import FreelancerProfile, Project

logger = logging.getLogger(__name__)


@dataclass
class CandidatePool:
    """
    A loaded snapshot of profiles, projects and applications.

    Attributes:
        profiles: Freelancer id -> profile
        projects: Project id -> project
        applications: Project id -> applicant ids in application order
    """
    profiles: Dict[str, FreelancerProfile] = field(default_factory=dict)
    projects: Dict[str, Project] = field(default_factory=dict)
    applications: Dict[str, List[str]] = field(default_factory=dict)

    def candidates_for(self, project_id: str) -> List[str]:
        """Applicants for a project (empty when nobody applied)."""
        return list(self.applications.get(project_id, []))

    def get_project(self, project_id: str) -> Project:
        """
        Look up a project.

        Raises:
            KeyError: If the project is not in the snapshot
        """
        if project_id not in self.projects:
            raise KeyError(f"Unknown project: {project_id}")
        return self.projects[project_id]


def load_profiles(records: Dict[str, Dict[str, Any]]) -> Dict[str, FreelancerProfile]:
    """
    Build profiles from raw records.

    Args:
        records: Freelancer id -> profile record

    Returns:
        Freelancer id -> FreelancerProfile

    Raises:
        ValueError: If a record holds an unknown quiz answer label
    """
    profiles = {}
    for user_id, record in records.items():
        profiles[user_id] = FreelancerProfile.from_dict(record, user_id=user_id)
    n_quiz = sum(1 for p in profiles.values() if p.quiz is not None)
    logger.info(f"Loaded {len(profiles)} profiles ({n_quiz} with quiz results)")
    return profiles


def load_projects(records: Dict[str, Dict[str, Any]]) -> Dict[str, Project]:
    """
    Build projects from raw records.

    Args:
        records: Project id -> project record

    Returns:
        Project id -> Project
    """
    projects = {pid: Project.from_dict(record, project_id=pid) for pid, record in records.items()}
    logger.info(f"Loaded {len(projects)} projects")
    return projects


def load_pool(filepath: str) -> CandidatePool:
    """
    Load a snapshot document from JSON.

    Args:
        filepath: Path to the JSON document

    Returns:
        CandidatePool with typed records

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the document is empty
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Pool file not found: {filepath}")

    logger.info(f"Loading candidate pool from {filepath}")
    with open(filepath, "r") as f:
        data = json.load(f)

    if not data:
        raise ValueError(f"Pool file is empty: {filepath}")

    applications = {
        pid: [str(c) for c in applicants]
        for pid, applicants in (data.get("applications") or {}).items()
    }
    return CandidatePool(
        profiles=load_profiles(data.get("profiles") or {}),
        projects=load_projects(data.get("projects") or {}),
        applications=applications,
    )

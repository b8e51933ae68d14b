"""Candidate and job records"""
from .models import Application, CandidateProfile, JobPosting

__all__ = ["Application", "CandidateProfile", "JobPosting"]

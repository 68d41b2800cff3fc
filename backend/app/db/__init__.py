"""
Database module for LeadTrack

Contains seed data and database utilities.
"""
from app.db.seed_data import seed_all, clear_all, seed_default_profiles

__all__ = ["seed_all", "clear_all", "seed_default_profiles"]

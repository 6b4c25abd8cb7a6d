"""Toxicology-forensic report endpoints and their symptom/summary lookups."""
from ..services.toxicology import post_mortem_summaries, symptoms, toxicology_reports
from .base import resource_views

report_views = resource_views(toxicology_reports, singular='Toxicology report', plural='Toxicology reports')
symptom_views = resource_views(symptoms, singular='Symptom', plural='Symptoms')
summary_views = resource_views(post_mortem_summaries, singular='Post-mortem summary', plural='Post-mortem summaries')

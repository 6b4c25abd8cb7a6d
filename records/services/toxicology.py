"""
Toxicology-forensic reports.

A report is written together with the person it concerns (with their
symptoms and post-mortem summaries) and the police report, all inside
one transaction.  Deleting a report removes the person, their symptom
and summary rows and the police report as well.
"""
from __future__ import annotations

import logging

from django.db import transaction
from django.utils import timezone

from ..exceptions import InvalidInput, NotFound
from ..models import (
    Person,
    PersonSummary,
    PersonSymptom,
    PoliceReport,
    PostMortemSummary,
    Symptom,
    ToxicologyForensicReport,
)
from ..serializers.toxicology import (
    PostMortemSummaryPayloadSerializer,
    PostMortemSummarySerializer,
    SymptomPayloadSerializer,
    SymptomSerializer,
    ToxicologyReportPayloadSerializer,
    ToxicologyReportSerializer,
)
from .access import RecordAccess, parse_id
from .filters import Contains, Exact, IntegerExact

logger = logging.getLogger(__name__)


def replace_symptoms(person: Person, entries) -> None:
    person.person_symptoms.all().delete()
    PersonSymptom.objects.bulk_create(
        PersonSymptom(person=person, symptom=e['symptom'], state=e.get('state', '')) for e in entries
    )


def replace_summaries(person: Person, entries) -> None:
    person.summaries.all().delete()
    PersonSummary.objects.bulk_create(
        PersonSummary(person=person, post_mortem_summary=e['post_mortem_summary'], state=e.get('state', ''))
        for e in entries
    )


class ToxicologyReportAccess(RecordAccess):
    model = ToxicologyForensicReport
    label = 'Toxicology report'
    payload_serializer_class = ToxicologyReportPayloadSerializer
    output_serializer_class = ToxicologyReportSerializer
    nested = ('person', 'police_report')
    filters = (
        Contains('person_name', 'person__name'),
        Exact('category', 'person__category'),
        Contains('specimen_sealed_by'),
        IntegerExact('practitioner_id'),
        IntegerExact('witness_id'),
    )

    def get_queryset(self):
        return (
            super()
            .get_queryset()
            .select_related('person', 'police_report')
            .prefetch_related('person__person_symptoms__symptom', 'person__summaries__post_mortem_summary')
        )

    def build_update(self, data):
        update = super().build_update(data)
        # an empty nested object carries nothing to write
        for key in self.nested:
            if key in update.fields and not update.fields[key]:
                del update.fields[key]
        if update.is_empty():
            raise InvalidInput('empty update: no updatable fields provided')
        return update

    def perform_create(self, fields):
        person_data = dict(fields.pop('person'))
        symptoms = person_data.pop('person_symptoms', [])
        summaries = person_data.pop('person_summaries', [])
        person = Person.objects.create(**person_data)
        replace_symptoms(person, symptoms)
        replace_summaries(person, summaries)
        police_report = PoliceReport.objects.create(**fields.pop('police_report'))
        return ToxicologyForensicReport.objects.create(person=person, police_report=police_report, **fields)

    def apply_nested(self, instance, nested):
        now = timezone.now()
        if 'person' in nested:
            person_data = dict(nested['person'])
            symptoms = person_data.pop('person_symptoms', None)
            summaries = person_data.pop('person_summaries', None)
            Person.objects.filter(pk=instance.person_id).update(updated_at=now, **person_data)
            if symptoms is not None:
                replace_symptoms(instance.person, symptoms)
            if summaries is not None:
                replace_summaries(instance.person, summaries)
        if 'police_report' in nested:
            report_data = dict(nested['police_report'])
            if instance.police_report_id:
                PoliceReport.objects.filter(pk=instance.police_report_id).update(updated_at=now, **report_data)
            elif 'officer' not in report_data:
                raise InvalidInput('Invalid input provided', data={'police_report': {'officer_id': ['This field is required.']}})
            else:
                instance.police_report = PoliceReport.objects.create(**report_data)
                instance.save(update_fields=['police_report', 'updated_at'])

    def delete(self, raw_id) -> int:
        pk = parse_id(raw_id)
        with transaction.atomic():
            report = ToxicologyForensicReport.objects.select_for_update().filter(pk=pk).first()
            if report is None:
                raise NotFound(f'{self.label} not found')
            person_id, police_report_id = report.person_id, report.police_report_id
            report.delete()
            # cascades to the person's symptom and summary rows
            Person.objects.filter(pk=person_id).delete()
            if police_report_id:
                PoliceReport.objects.filter(pk=police_report_id).delete()
        logger.info("deleted %s id=%s with person id=%s", self.label, pk, person_id)
        return pk


class SymptomAccess(RecordAccess):
    model = Symptom
    label = 'Symptom'
    payload_serializer_class = SymptomPayloadSerializer
    output_serializer_class = SymptomSerializer
    filters = (Contains('name'),)
    conflict_message = 'A symptom with this name already exists'


class PostMortemSummaryAccess(RecordAccess):
    model = PostMortemSummary
    label = 'Post-mortem summary'
    payload_serializer_class = PostMortemSummaryPayloadSerializer
    output_serializer_class = PostMortemSummarySerializer
    filters = (Contains('description'),)


toxicology_reports = ToxicologyReportAccess()
symptoms = SymptomAccess()
post_mortem_summaries = PostMortemSummaryAccess()

"""
Database models for the GBVMIS records backend.

Records are plain rows with foreign-key and many-to-many links and no
business rules beyond storage.  Every table carries ``created_at`` and
``updated_at`` stamped by the storage layer.  Police officers double as
the authentication user model.
"""
from __future__ import annotations

from django.contrib.auth.models import AbstractUser
from django.db import models


class TimeStampedModel(models.Model):
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


# ---------------------------------------------------------------------
# Police
# ---------------------------------------------------------------------
class PolicePost(TimeStampedModel):
    name = models.CharField(max_length=255)
    location = models.CharField(max_length=255, blank=True)
    contact = models.CharField(max_length=64, blank=True)

    def __str__(self) -> str:
        return self.name


class PoliceRole(TimeStampedModel):
    """Named role attached to officers, e.g. ``Admin`` or ``Station Manager``."""
    name = models.CharField(max_length=100, unique=True)

    def __str__(self) -> str:
        return self.name


class PoliceOfficer(AbstractUser):
    """Police officer account.

    Officers log in with their username or email.  Role names are
    embedded into issued JWTs, see :mod:`records.tokens`.
    """
    email = models.EmailField(unique=True)
    rank = models.CharField(max_length=64, blank=True)
    badge_no = models.CharField(max_length=64, blank=True)
    phone = models.CharField(max_length=32, blank=True)
    post = models.ForeignKey(
        PolicePost, null=True, blank=True, on_delete=models.SET_NULL, related_name='officers'
    )
    roles = models.ManyToManyField(PoliceRole, blank=True, related_name='officers')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    REQUIRED_FIELDS = ['email']

    def role_names(self) -> list[str]:
        return [r.name for r in self.roles.all()]

    def __str__(self) -> str:
        return f"{self.username} ({self.badge_no})"


# ---------------------------------------------------------------------
# People and cases
# ---------------------------------------------------------------------
class Victim(TimeStampedModel):
    first_name = models.CharField(max_length=50)
    last_name = models.CharField(max_length=50)
    gender = models.CharField(max_length=16, blank=True)
    dob = models.DateField(null=True, blank=True)
    phone_number = models.CharField(max_length=32, blank=True)
    address = models.CharField(max_length=255, blank=True)
    nationality = models.CharField(max_length=64, blank=True)
    nin = models.CharField(max_length=32, blank=True, db_index=True)
    created_by = models.CharField(max_length=50)
    updated_by = models.CharField(max_length=50, blank=True)

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Suspect(TimeStampedModel):
    """Suspect or accused person.

    ``photo`` and ``fingerprints`` are opaque blobs uploaded as multipart
    files; their format is never inspected.
    """
    first_name = models.CharField(max_length=50)
    middle_name = models.CharField(max_length=50, blank=True)
    last_name = models.CharField(max_length=50)
    dob = models.DateField(null=True, blank=True)
    gender = models.CharField(max_length=50, blank=True)
    phone_number = models.CharField(max_length=32, blank=True)
    nin = models.CharField(max_length=32, blank=True, db_index=True)
    nationality = models.CharField(max_length=64, blank=True)
    address = models.CharField(max_length=255, blank=True)
    occupation = models.CharField(max_length=128, blank=True)
    status = models.CharField(max_length=50, blank=True)
    fingerprints = models.BinaryField(null=True, blank=True)
    photo = models.BinaryField(null=True, blank=True)
    created_by = models.CharField(max_length=50)
    updated_by = models.CharField(max_length=50, blank=True)

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Charge(TimeStampedModel):
    charge_title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    # e.g. Felony, Misdemeanor
    severity = models.CharField(max_length=64, blank=True)

    def __str__(self) -> str:
        return self.charge_title


class Witness(TimeStampedModel):
    first_name = models.CharField(max_length=50)
    last_name = models.CharField(max_length=50, blank=True)
    phone_number = models.CharField(max_length=32, blank=True)
    address = models.CharField(max_length=255, blank=True)
    statement = models.TextField(blank=True)

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class Case(TimeStampedModel):
    case_number = models.CharField(max_length=64, unique=True)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    status = models.CharField(max_length=50, blank=True)
    date_opened = models.DateField(null=True, blank=True)
    officer = models.ForeignKey(
        PoliceOfficer, null=True, blank=True, on_delete=models.SET_NULL, related_name='cases'
    )
    police_post = models.ForeignKey(
        PolicePost, null=True, blank=True, on_delete=models.SET_NULL, related_name='cases'
    )
    suspects = models.ManyToManyField(Suspect, blank=True, related_name='cases')
    charges = models.ManyToManyField(Charge, blank=True, related_name='cases')
    victims = models.ManyToManyField(Victim, blank=True, related_name='cases')
    witnesses = models.ManyToManyField(Witness, blank=True, related_name='cases')

    def __str__(self) -> str:
        return f"{self.case_number} {self.title}"


class Arrest(TimeStampedModel):
    arrest_date = models.DateField(null=True, blank=True, db_index=True)
    location = models.CharField(max_length=255, blank=True)
    officer_name = models.CharField(max_length=128, blank=True)
    suspect = models.ForeignKey(
        Suspect, null=True, blank=True, on_delete=models.SET_NULL, related_name='arrests'
    )
    notes = models.TextField(blank=True)

    def __str__(self) -> str:
        return f"Arrest #{self.pk} {self.arrest_date}"


# ---------------------------------------------------------------------
# Medical
# ---------------------------------------------------------------------
class HealthFacility(TimeStampedModel):
    name = models.CharField(max_length=255)
    location = models.CharField(max_length=255, blank=True)
    contact = models.CharField(max_length=64, blank=True)

    class Meta:
        verbose_name_plural = 'health facilities'

    def __str__(self) -> str:
        return self.name


class HealthPractitioner(TimeStampedModel):
    first_name = models.CharField(max_length=50)
    last_name = models.CharField(max_length=50)
    gender = models.CharField(max_length=16, blank=True)
    phone = models.CharField(max_length=32, blank=True)
    profession = models.CharField(max_length=128, blank=True)
    facility = models.ForeignKey(
        HealthFacility, null=True, blank=True, on_delete=models.SET_NULL, related_name='practitioners'
    )

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Examination(TimeStampedModel):
    victim = models.ForeignKey(
        Victim, null=True, blank=True, on_delete=models.SET_NULL, related_name='examinations'
    )
    case = models.ForeignKey(
        Case, null=True, blank=True, on_delete=models.SET_NULL, related_name='examinations'
    )
    facility = models.ForeignKey(
        HealthFacility, null=True, blank=True, on_delete=models.SET_NULL, related_name='examinations'
    )
    practitioner = models.ForeignKey(
        HealthPractitioner, null=True, blank=True, on_delete=models.SET_NULL, related_name='examinations'
    )
    exam_date = models.DateField(null=True, blank=True, db_index=True)
    findings = models.TextField(blank=True)
    treatment = models.TextField(blank=True)
    referral = models.CharField(max_length=255, blank=True)
    consent_given = models.BooleanField(default=False)

    def __str__(self) -> str:
        return f"Examination #{self.pk} {self.exam_date}"


# ---------------------------------------------------------------------
# Toxicology / forensic
# ---------------------------------------------------------------------
class Symptom(TimeStampedModel):
    name = models.CharField(max_length=128, unique=True)

    def __str__(self) -> str:
        return self.name


class PostMortemSummary(TimeStampedModel):
    description = models.TextField()

    class Meta:
        verbose_name_plural = 'post-mortem summaries'

    def __str__(self) -> str:
        return self.description[:50]


class Person(TimeStampedModel):
    """Sick or deceased person a toxicology report is about."""
    CATEGORY_CHOICES = [
        ('sick', 'Sick'),
        ('deceased', 'Deceased'),
    ]
    name = models.CharField(max_length=255)
    occupation = models.CharField(max_length=128, blank=True)
    habits = models.JSONField(default=list, blank=True)
    approximate_age = models.PositiveIntegerField(null=True, blank=True)
    gender = models.CharField(max_length=16, blank=True)
    category = models.CharField(max_length=10, choices=CATEGORY_CHOICES, blank=True)
    date_hour_of_post_mortem = models.DateTimeField(null=True, blank=True)

    def __str__(self) -> str:
        return self.name


class PersonSymptom(TimeStampedModel):
    person = models.ForeignKey(Person, on_delete=models.CASCADE, related_name='person_symptoms')
    symptom = models.ForeignKey(Symptom, on_delete=models.CASCADE, related_name='person_symptoms')
    # e.g. mild, severe, resolved
    state = models.CharField(max_length=64, blank=True)


class PersonSummary(TimeStampedModel):
    person = models.ForeignKey(Person, on_delete=models.CASCADE, related_name='summaries')
    post_mortem_summary = models.ForeignKey(
        PostMortemSummary, on_delete=models.CASCADE, related_name='people_summaries'
    )
    state = models.CharField(max_length=64, blank=True)


class PoliceReport(TimeStampedModel):
    officer = models.ForeignKey(
        PoliceOfficer, null=True, blank=True, on_delete=models.SET_NULL, related_name='police_reports'
    )
    date = models.DateField(null=True, blank=True)
    is_person_poisoned = models.BooleanField(default=False)
    is_suicide_or_accident = models.BooleanField(default=False)
    is_deceased_on_treatment = models.BooleanField(default=False)
    treatment_details = models.TextField(blank=True)


class ToxicologyForensicReport(TimeStampedModel):
    person = models.OneToOneField(Person, on_delete=models.CASCADE, related_name='toxicology_report')
    witness = models.ForeignKey(
        Witness, null=True, blank=True, on_delete=models.SET_NULL, related_name='toxicology_reports'
    )
    practitioner = models.ForeignKey(
        HealthPractitioner, null=True, blank=True, on_delete=models.SET_NULL, related_name='toxicology_reports'
    )
    police_report = models.OneToOneField(
        PoliceReport, null=True, blank=True, on_delete=models.SET_NULL, related_name='toxicology_report'
    )
    date_onset = models.DateField(null=True, blank=True)
    date_hour_of_death = models.DateTimeField(null=True, blank=True)
    date_hour_of_burial = models.DateTimeField(null=True, blank=True)
    date_hour_of_exhumation = models.DateTimeField(null=True, blank=True)
    specimen_sealed_by = models.CharField(max_length=128, blank=True)
    witnessed_by = models.CharField(max_length=128, blank=True)
    handed_over_to = models.CharField(max_length=128, blank=True)

    def __str__(self) -> str:
        return f"Toxicology report #{self.pk}"

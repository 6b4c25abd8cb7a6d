"""
Django admin registrations for the record models.

Gives superusers a ``/admin/`` view over every record table for
inspection and manual correction: list columns, filters and search on
the fields people look up by.
"""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from .models import (
    Arrest,
    Case,
    Charge,
    Examination,
    HealthFacility,
    HealthPractitioner,
    Person,
    PoliceOfficer,
    PolicePost,
    PoliceReport,
    PoliceRole,
    PostMortemSummary,
    Suspect,
    Symptom,
    ToxicologyForensicReport,
    Victim,
    Witness,
)


@admin.register(PoliceOfficer)
class PoliceOfficerAdmin(UserAdmin):
    list_display = ('username', 'email', 'first_name', 'last_name', 'rank', 'badge_no', 'post', 'is_staff')
    list_filter = ('post', 'roles', 'is_staff', 'is_active')
    search_fields = ('username', 'email', 'first_name', 'last_name', 'badge_no')
    fieldsets = UserAdmin.fieldsets + (
        ('Police', {'fields': ('rank', 'badge_no', 'phone', 'post', 'roles')}),
    )


@admin.register(PolicePost)
class PolicePostAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'location', 'contact')
    search_fields = ('name', 'location')


@admin.register(PoliceRole)
class PoliceRoleAdmin(admin.ModelAdmin):
    list_display = ('id', 'name')
    search_fields = ('name',)


@admin.register(Victim)
class VictimAdmin(admin.ModelAdmin):
    list_display = ('id', 'first_name', 'last_name', 'gender', 'nationality', 'nin', 'created_at')
    list_filter = ('gender', 'nationality')
    search_fields = ('first_name', 'last_name', 'nin', 'phone_number')


@admin.register(Suspect)
class SuspectAdmin(admin.ModelAdmin):
    list_display = ('id', 'first_name', 'last_name', 'gender', 'status', 'nin', 'created_at')
    list_filter = ('status', 'gender')
    search_fields = ('first_name', 'middle_name', 'last_name', 'nin', 'phone_number')
    exclude = ('photo', 'fingerprints')


@admin.register(Case)
class CaseAdmin(admin.ModelAdmin):
    list_display = ('id', 'case_number', 'title', 'status', 'date_opened', 'police_post')
    list_filter = ('status', 'police_post')
    search_fields = ('case_number', 'title')
    filter_horizontal = ('suspects', 'charges', 'victims', 'witnesses')


@admin.register(Charge)
class ChargeAdmin(admin.ModelAdmin):
    list_display = ('id', 'charge_title', 'severity')
    search_fields = ('charge_title',)


@admin.register(Witness)
class WitnessAdmin(admin.ModelAdmin):
    list_display = ('id', 'first_name', 'last_name', 'phone_number')
    search_fields = ('first_name', 'last_name')


@admin.register(Arrest)
class ArrestAdmin(admin.ModelAdmin):
    list_display = ('id', 'arrest_date', 'location', 'officer_name', 'suspect')
    search_fields = ('location', 'officer_name')


@admin.register(HealthFacility)
class HealthFacilityAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'location', 'contact')
    search_fields = ('name', 'location')


@admin.register(HealthPractitioner)
class HealthPractitionerAdmin(admin.ModelAdmin):
    list_display = ('id', 'first_name', 'last_name', 'profession', 'facility')
    list_filter = ('facility', 'profession')
    search_fields = ('first_name', 'last_name')


@admin.register(Examination)
class ExaminationAdmin(admin.ModelAdmin):
    list_display = ('id', 'exam_date', 'victim', 'case', 'facility', 'practitioner', 'consent_given')
    list_filter = ('facility', 'consent_given')


@admin.register(Symptom)
class SymptomAdmin(admin.ModelAdmin):
    search_fields = ('name',)


admin.site.register(PostMortemSummary)
admin.site.register(Person)
admin.site.register(PoliceReport)


@admin.register(ToxicologyForensicReport)
class ToxicologyForensicReportAdmin(admin.ModelAdmin):
    list_display = ('id', 'person', 'practitioner', 'date_onset', 'created_at')
    search_fields = ('person__name', 'specimen_sealed_by')

"""
Django admin registrations for the clinic models.

Lets superusers inspect and fix accounts and appointments under
``/admin/``.  Patient edits made here bypass the command services, so the
cached patient list is dropped on every admin save or delete.
"""
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import Patient, User
from .services.queries import invalidate_patient_list


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ('username', 'role', 'is_staff', 'is_superuser', 'is_active')
    list_filter = ('role', 'is_staff', 'is_active')
    search_fields = ('username', 'first_name', 'last_name')
    fieldsets = BaseUserAdmin.fieldsets + (('Clinic', {'fields': ('role',)}),)


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ('id', 'patient_name', 'doctor_name', 'date', 'time', 'status')
    list_filter = ('status', 'date')
    search_fields = ('patient_name', 'doctor_name')

    def save_model(self, request, obj, form, change):
        super().save_model(request, obj, form, change)
        invalidate_patient_list()

    def delete_model(self, request, obj):
        super().delete_model(request, obj)
        invalidate_patient_list()

    def delete_queryset(self, request, queryset):
        super().delete_queryset(request, queryset)
        invalidate_patient_list()

from django.contrib import admin
from .models import Professor


@admin.register(Professor)
class ProfessorAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "subject", "email", "phone", "status", "created_at")
    search_fields = ("name", "subject", "email")
    list_filter = ("subject", "status")

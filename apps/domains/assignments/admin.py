# apps/domains/assignments/admin.py
from django.contrib import admin

from apps.domains.assignments.models import ExamAssignment


@admin.register(ExamAssignment)
class ExamAssignmentAdmin(admin.ModelAdmin):
    list_display = ("id", "candidate_code", "exam", "student", "tenant", "status", "window_end", "is_active")
    list_filter = ("status", "is_active", "tenant")
    search_fields = ("candidate_code", "student__username", "exam__title")
    # status / answers / scores are owned by the session + scoring services
    readonly_fields = ("candidate_code", "status", "answers", "final_scores", "completed_at", "created_at", "updated_at")

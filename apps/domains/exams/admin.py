# apps/domains/exams/admin.py
from django.contrib import admin

from apps.domains.exams.models import Exam, ExamPart, WritingTask


class ExamPartInline(admin.StackedInline):
    model = ExamPart
    extra = 0


class WritingTaskInline(admin.StackedInline):
    model = WritingTask
    extra = 0


@admin.register(Exam)
class ExamAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "tenant", "is_active", "created_at")
    list_filter = ("is_active", "tenant")
    search_fields = ("title",)
    inlines = [ExamPartInline, WritingTaskInline]

import django_filters

from apps.domains.assignments.models import ExamAssignment


class ExamAssignmentFilter(django_filters.FilterSet):
    """
    staff list filters
    - status / exam / student (front screens)
    - window_end range (upcoming / overdue views)
    """

    status = django_filters.ChoiceFilter(choices=ExamAssignment.Status.choices)
    exam = django_filters.NumberFilter(field_name="exam_id")
    student = django_filters.NumberFilter(field_name="student_id")
    window_end_after = django_filters.IsoDateTimeFilter(field_name="window_end", lookup_expr="gte")
    window_end_before = django_filters.IsoDateTimeFilter(field_name="window_end", lookup_expr="lte")

    class Meta:
        model = ExamAssignment
        fields = [
            "status",
            "exam",
            "student",
        ]

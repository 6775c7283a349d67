from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("core", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Exam",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("is_active", models.BooleanField(default=True)),
                ("tenant", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="exams", to="core.tenant")),
            ],
            options={
                "db_table": "exams_exam",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="ExamPart",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("section", models.CharField(choices=[("listening", "Listening"), ("reading", "Reading")], max_length=20)),
                ("label", models.CharField(max_length=20)),
                ("order", models.PositiveIntegerField(default=1)),
                ("content", models.JSONField(blank=True, default=list)),
                ("number_of_questions", models.PositiveIntegerField(default=10)),
                ("answers", models.JSONField(blank=True, default=dict)),
                ("passage", models.TextField(blank=True)),
                ("audio_url", models.URLField(blank=True, max_length=512)),
                ("exam", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="parts", to="exams.exam")),
            ],
            options={
                "db_table": "exams_exam_part",
                "ordering": ["section", "order", "id"],
                "unique_together": {("exam", "section", "order")},
            },
        ),
        migrations.CreateModel(
            name="WritingTask",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("task", models.CharField(choices=[("task1", "Task 1"), ("task2", "Task 2")], max_length=10)),
                ("prompt", models.TextField()),
                ("visual_url", models.URLField(blank=True, max_length=512)),
                ("min_words", models.PositiveIntegerField(default=150)),
                ("time_minutes", models.PositiveIntegerField(default=20)),
                ("exam", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="writing_tasks", to="exams.exam")),
            ],
            options={
                "db_table": "exams_writing_task",
                "ordering": ["task"],
                "unique_together": {("exam", "task")},
            },
        ),
    ]

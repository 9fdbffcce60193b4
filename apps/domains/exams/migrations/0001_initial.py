import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("professors", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Question",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("header", models.TextField()),
                ("alternatives", models.JSONField(default=list)),
                ("correct_answer", models.PositiveSmallIntegerField()),
                ("educational_indicator", models.CharField(db_index=True, max_length=255)),
                ("is_active", models.BooleanField(default=True)),
                (
                    "professor",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="questions",
                        to="professors.professor",
                    ),
                ),
            ],
            options={
                "db_table": "exams_question",
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="Exam",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, default="")),
                (
                    "status",
                    models.CharField(
                        choices=[("DRAFT", "Draft"), ("ACTIVE", "Active"), ("INACTIVE", "Inactive")],
                        db_index=True,
                        default="DRAFT",
                        max_length=10,
                    ),
                ),
                ("time_limit", models.PositiveIntegerField(blank=True, null=True)),
                ("total_questions", models.PositiveIntegerField(default=0)),
            ],
            options={
                "db_table": "exams_exam",
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="ExamQuestion",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("order", models.PositiveIntegerField()),
                (
                    "exam",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="exam_questions",
                        to="exams.exam",
                    ),
                ),
                (
                    "question",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="exam_links",
                        to="exams.question",
                    ),
                ),
            ],
            options={
                "db_table": "exams_exam_question",
                "ordering": ["order"],
            },
        ),
        migrations.AddField(
            model_name="exam",
            name="questions",
            field=models.ManyToManyField(
                related_name="exams",
                through="exams.ExamQuestion",
                to="exams.question",
            ),
        ),
        migrations.AddConstraint(
            model_name="examquestion",
            constraint=models.UniqueConstraint(fields=("exam", "question"), name="exams_exam_question_uniq"),
        ),
        migrations.AddConstraint(
            model_name="examquestion",
            constraint=models.UniqueConstraint(fields=("exam", "order"), name="exams_exam_order_uniq"),
        ),
    ]

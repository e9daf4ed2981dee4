from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Employee",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("full_name", models.CharField(max_length=100, verbose_name="Full name")),
                (
                    "department",
                    models.CharField(
                        help_text="One of the configured EMPLOYEE_DEPARTMENTS",
                        max_length=100,
                        verbose_name="Department",
                    ),
                ),
                (
                    "email",
                    models.EmailField(
                        help_text="Business email address, unique across the directory",
                        max_length=254,
                        unique=True,
                        verbose_name="Email address",
                    ),
                ),
                ("phone", models.CharField(blank=True, max_length=20, verbose_name="Phone")),
                (
                    "address",
                    models.CharField(blank=True, max_length=250, verbose_name="Address"),
                ),
                (
                    "row_version",
                    models.PositiveIntegerField(
                        default=1,
                        editable=False,
                        help_text="Optimistic concurrency token, bumped on every update",
                    ),
                ),
                (
                    "created_at",
                    models.DateTimeField(auto_now_add=True, verbose_name="Created at"),
                ),
                (
                    "updated_at",
                    models.DateTimeField(auto_now=True, verbose_name="Updated at"),
                ),
            ],
            options={
                "verbose_name": "Employee",
                "verbose_name_plural": "Employees",
                "ordering": ["full_name"],
                "indexes": [
                    models.Index(fields=["full_name"], name="employee_full_name_idx"),
                    models.Index(fields=["department"], name="employee_department_idx"),
                ],
            },
        ),
    ]

from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("mentorbooking", "0001_initial"),
    ]

    operations = [
        migrations.AddField(
            model_name="event",
            name="initial_selected_mentors",
            field=models.JSONField(blank=True, default=list),
        ),
    ]

from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("orders", "0001_initial"),
    ]

    operations = [
        migrations.AlterField(
            model_name="order",
            name="shop_name",
            field=models.TextField(blank=True, default=None, null=True),
        ),
    ]

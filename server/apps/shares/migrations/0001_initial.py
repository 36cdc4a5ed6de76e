from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='FileRecord',
            fields=[
                ('slug', models.TextField(help_text='Public identifier used in /f/<slug> links', primary_key=True, serialize=False)),
                ('object_name', models.TextField(help_text='Storage key of the uploaded object', unique=True)),
                ('size_bytes', models.BigIntegerField(help_text='Object size in bytes, captured at finalize time')),
                ('content_type', models.TextField(blank=True, help_text='Content type reported by storage, if any', null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'verbose_name': 'File Record',
                'verbose_name_plural': 'File Records',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['-created_at'], name='shares_created_at_idx')],
                'constraints': [models.CheckConstraint(condition=models.Q(('size_bytes__gte', 0)), name='size_bytes_non_negative')],
            },
        ),
    ]

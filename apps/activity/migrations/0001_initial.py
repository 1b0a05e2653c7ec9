# Generated manually for the activity app

import uuid
from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('rooms', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Activity',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('description', models.TextField()),
                ('type', models.CharField(choices=[('join', 'Join'), ('leave', 'Leave'), ('expense', 'Expense'), ('purchase', 'Purchase'), ('lock', 'Lock'), ('calendar', 'Calendar'), ('chat', 'Chat')], max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('room', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='activities', to='rooms.room')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='activities', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'activities',
                'verbose_name_plural': 'activities',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['room', 'created_at'], name='activity_room_created_idx'),
                ],
            },
        ),
    ]

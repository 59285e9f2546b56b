"""
Program year: the season an organization plans projects and auditions in.
At most one year per organization is current.
"""
from django.db import models


class ProgramYear(models.Model):
    organization = models.ForeignKey(
        'core.Organization',
        on_delete=models.CASCADE,
        related_name='program_years',
        db_column='organization_id',
    )
    name = models.CharField(max_length=100)
    start_date = models.DateField()
    end_date = models.DateField()
    is_current = models.BooleanField(default=False, db_index=True)
    is_archived = models.BooleanField(default=False, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'program_years'
        verbose_name = 'Program Year'
        verbose_name_plural = 'Program Years'
        ordering = ['-start_date']
        constraints = [
            models.UniqueConstraint(
                fields=['organization'],
                condition=models.Q(is_current=True),
                name='unique_current_program_year_per_organization',
            ),
        ]

    def __str__(self):
        return self.name

"""
Program year services. Every call takes the organization id explicitly.
"""
import logging

from django.db import IntegrityError, transaction

from core.exceptions import NotFoundError, UnprocessableEntity, ValidationError
from program_years.models import ProgramYear

logger = logging.getLogger(__name__)


def _validate_range(start_date, end_date):
    if start_date >= end_date:
        raise ValidationError.for_field('startDate', 'Start date must be before end date')


def list_program_years(organization_id):
    return list(ProgramYear.objects.filter(organization_id=organization_id).order_by('-start_date'))


def get_program_year(program_year_id, organization_id):
    year = ProgramYear.objects.filter(id=program_year_id, organization_id=organization_id).first()
    if year is None:
        raise NotFoundError('Program year not found')
    return year


def create_program_year(organization_id, *, name, start_date, end_date):
    _validate_range(start_date, end_date)
    year = ProgramYear.objects.create(
        organization_id=organization_id,
        name=name.strip(),
        start_date=start_date,
        end_date=end_date,
    )
    logger.info('Program year created: id=%s org=%s', year.id, organization_id)
    return year


def update_program_year(program_year_id, organization_id, *, name, start_date, end_date):
    year = get_program_year(program_year_id, organization_id)
    _validate_range(start_date, end_date)
    year.name = name.strip()
    year.start_date = start_date
    year.end_date = end_date
    year.save(update_fields=['name', 'start_date', 'end_date', 'updated_at'])
    return year


def archive_program_year(program_year_id, organization_id):
    year = get_program_year(program_year_id, organization_id)
    year.is_archived = True
    year.is_current = False
    year.save(update_fields=['is_archived', 'is_current', 'updated_at'])
    logger.info('Program year archived: id=%s org=%s', year.id, organization_id)
    return year


def activate_program_year(program_year_id, organization_id):
    """
    Make this year the organization's current one; every other year stops being current.
    The organization's years are row-locked so concurrent activations run one after another.
    """
    try:
        with transaction.atomic():
            years = {
                y.id: y for y in ProgramYear.objects.select_for_update()
                .filter(organization_id=organization_id).order_by('id')
            }
            year = years.get(program_year_id)
            if year is None:
                raise NotFoundError('Program year not found')
            if year.is_archived:
                raise UnprocessableEntity('Archived program years cannot be activated')

            ProgramYear.objects.filter(organization_id=organization_id, is_current=True).exclude(
                id=year.id
            ).update(is_current=False)
            year.is_current = True
            year.save(update_fields=['is_current', 'updated_at'])
    except IntegrityError:
        logger.warning('Program year activation conflict: id=%s org=%s', program_year_id, organization_id)
        raise UnprocessableEntity('Another program year was activated at the same time; retry')

    logger.info('Program year activated: id=%s org=%s', year.id, organization_id)
    return year

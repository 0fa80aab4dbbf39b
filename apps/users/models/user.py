from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """Point-of-sale employee account; ``role`` drives discount authority"""
    ROLE_CHOICES = [
        ('user', 'User'),
        ('staff', 'Staff'),
        ('manager', 'Manager'),
        ('master', 'Master'),
        ('admin', 'Admin'),
    ]
    APPROVER_ROLES = ('manager', 'master', 'admin')
    TIER_ADMIN_ROLES = ('master', 'admin')

    role = models.CharField(max_length=30, choices=ROLE_CHOICES, default='user', db_index=True)
    phone = models.CharField(max_length=20, unique=True, null=True, blank=True)
    employee_number = models.CharField(max_length=30, unique=True, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'

    def __str__(self):
        return self.username or self.employee_number or f"User {self.id}"

    @property
    def full_name(self):
        name = f"{self.first_name} {self.last_name}".strip()
        return name or self.username

    @property
    def can_review_discounts(self):
        """Managers and above may approve or deny discount escalations"""
        return self.is_superuser or (self.role or '').lower() in self.APPROVER_ROLES

    @property
    def can_manage_tiers(self):
        return self.is_superuser or (self.role or '').lower() in self.TIER_ADMIN_ROLES

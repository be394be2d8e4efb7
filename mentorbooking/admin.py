from django.contrib import admin

from mentorbooking.models import Account, Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "company", "starts_at", "required_mentors"]
    search_fields = ["title", "company"]
    list_filter = ["starts_at"]
    # Membership changes go through the membership service only.
    readonly_fields = ["requesting_mentors", "accepted_mentors", "declined_mentors"]


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    list_display = ["user", "role"]
    list_filter = ["role"]
    search_fields = ["user__username", "user__email"]

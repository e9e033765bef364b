from __future__ import annotations

import logging
from datetime import datetime, time, timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand  # type: ignore
from django.db import transaction  # type: ignore
from django.utils import timezone  # type: ignore

from apps.activities.models import Activity
from apps.clients.models import Client
from apps.properties.models import Property
from apps.scheduling.models import Appointment
from apps.theming.models import SiteContent, ThemeSettings
from apps.users.models import CustomUser

logger = logging.getLogger(__name__)

UNSPLASH = "https://images.unsplash.com/{}?auto=format&fit=crop&w={}&h={}"

REALTOR = {
    "username": "alexmorgan",
    "name": "Alex Morgan",
    "email": "alex@example.com",
    "phone": "555-987-6543",
    "profile_image": UNSPLASH.format("photo-1500648767791-00dcc994a43e", 500, 500),
}

CLIENTS = [
    ("Sarah Johnson", "sarah@example.com", "555-123-4567", "photo-1573496359142-b8d87734a5a2"),
    ("David Miller", "david@example.com", "555-234-5678", "photo-1560250097-0b93528c311a"),
    ("Jennifer Lee", "jennifer@example.com", "555-345-6789", "photo-1580489944761-15a19d654956"),
    ("Michael Chang", "michael@example.com", "555-456-7890", "photo-1507003211169-0a1dd7228f2d"),
]

PROPERTIES = [
    {
        "title": "Luxury Villa",
        "address": "123 Luxury Ave",
        "city": "Beverly Hills",
        "state": "CA",
        "zip_code": "90210",
        "price": Decimal("4500000"),
        "bedrooms": 5,
        "bathrooms": Decimal("4"),
        "square_feet": 6200,
        "description": (
            "This stunning luxury villa offers the perfect blend of elegant design and modern "
            "convenience, with panoramic views, a gourmet kitchen and a landscaped backyard "
            "with a swimming pool and outdoor kitchen."
        ),
        "listing_type": Property.ListingType.FOR_SALE,
        "image": "photo-1600596542815-ffad4c1539a9",
        "features": ["Swimming Pool", "Smart Home System", "Home Theater", "Wine Cellar", "Outdoor Kitchen", "3-Car Garage"],
    },
    {
        "title": "Modern House",
        "address": "456 Contemporary Dr",
        "city": "Bel Air",
        "state": "CA",
        "zip_code": "90077",
        "price": Decimal("2800000"),
        "bedrooms": 4,
        "bathrooms": Decimal("3"),
        "square_feet": 3800,
        "description": (
            "A modern architectural masterpiece with clean lines and open spaces, smart home "
            "technology and a seamless indoor-outdoor living experience."
        ),
        "listing_type": Property.ListingType.FOR_SALE,
        "image": "photo-1512917774080-9991f1c4c750",
        "features": ["Smart Home", "Wine Cellar", "Home Office", "Media Room"],
    },
    {
        "title": "Luxury Penthouse",
        "address": "789 Skyline Blvd",
        "city": "Los Angeles",
        "state": "CA",
        "zip_code": "90001",
        "price": Decimal("180000"),
        "bedrooms": 3,
        "bathrooms": Decimal("3.5"),
        "square_feet": 3200,
        "description": (
            "Stunning penthouse with panoramic city views, high-end finishes, a gourmet kitchen "
            "and a private rooftop terrace."
        ),
        "listing_type": Property.ListingType.FOR_RENT,
        "image": "photo-1613977257363-707ba9348227",
        "features": ["City Views", "Concierge", "Fitness Center", "Spa"],
    },
    {
        "title": "Elegant Villa",
        "address": "321 Ocean View Dr",
        "city": "Malibu",
        "state": "CA",
        "zip_code": "90265",
        "price": Decimal("5200000"),
        "bedrooms": 6,
        "bathrooms": Decimal("5"),
        "square_feet": 7500,
        "description": (
            "Breathtaking oceanfront villa with private beach access, expansive living areas, "
            "a chef's kitchen and magnificent outdoor spaces."
        ),
        "listing_type": Property.ListingType.FOR_SALE,
        "image": "photo-1600607687939-ce8a6c25118c",
        "features": ["Ocean Views", "Private Beach", "Pool", "Tennis Court"],
    },
]

# (title, location, days from today, local time, client, property, notes)
APPOINTMENTS = [
    ("Property Viewing", "123 Luxury Ave, Beverly Hills, CA", 0, time(10, 30),
     "Sarah Johnson", "Luxury Villa", "Client is very interested in this property"),
    ("Listing Presentation", "321 Ocean View Dr, Malibu, CA", 0, time(14, 0),
     "David Miller", "Elegant Villa", "Prepare listing presentation materials"),
    ("Client Meeting", "Office - Conference Room B", 1, time(11, 0),
     "Jennifer Lee", None, "Discuss property requirements"),
    ("Property Viewing", "789 Skyline Blvd, Los Angeles, CA", 1, time(15, 30),
     "Michael Chang", "Luxury Penthouse", "Client interested in penthouse option"),
]

# (type, title, description, property, minutes ago)
ACTIVITIES = [
    (Activity.Type.MESSAGE, "New message from David Miller",
     "Hey, are we still meeting today at 3pm?", None, 10),
    (Activity.Type.OFFER, "Offer accepted", "Luxury Penthouse on 123 Skyline Blvd", "Luxury Penthouse", 60),
    (Activity.Type.LISTING, "New listing added", "5 Bed Villa on 789 Sunset Dr", "Elegant Villa", 120),
]

HOME_CONTENT = {
    "hero": {
        "heroHeadline": "Find Your Dream Home",
        "heroSubheadline": "Discover exceptional properties with our expert real estate services",
        "heroButtonText": "Browse Properties",
        "heroImage": UNSPLASH.format("photo-1600596542815-ffad4c1539a9", 2000, 1200),
    },
    "about": {
        "subtitle": "About LuxeLead",
        "title": "Your Trusted Partner\nin Luxury Real Estate",
        "description": (
            "With over a decade of experience in the luxury real estate market, we provide "
            "unparalleled expertise and personalized service to help you find your perfect home "
            "or investment opportunity."
        ),
        "buttonText": "Learn More",
    },
}


class Command(BaseCommand):
    help = "Create demo data (realtor, clients, listings, appointments). Safe to run repeatedly."

    @transaction.atomic
    def handle(self, *args, **options):  # type: ignore
        realtor = self._seed_realtor()
        clients = self._seed_clients(realtor)
        properties = self._seed_properties(realtor)
        self._seed_appointments(realtor, clients, properties)
        self._seed_activities(realtor, properties)
        self._seed_theme()
        logger.info(f"Demo data seeded for realtor {realtor.username}")
        self.stdout.write(self.style.SUCCESS(f"Demo data ready for {realtor.username}"))

    def _seed_realtor(self) -> CustomUser:
        fields = dict(REALTOR)
        username = fields.pop("username")
        realtor = CustomUser.objects.filter(username=username).first()
        if realtor is None:
            realtor = CustomUser.objects.create_user(username=username, password="password", **fields)
        return realtor

    def _seed_clients(self, realtor) -> dict:
        clients = {}
        for name, email, phone, photo in CLIENTS:
            client, _ = Client.objects.get_or_create(
                realtor=realtor,
                email=email,
                defaults={
                    "name": name,
                    "phone": phone,
                    "profile_image": UNSPLASH.format(photo, 500, 500),
                },
            )
            clients[name] = client
        return clients

    def _seed_properties(self, realtor) -> dict:
        properties = {}
        for data in PROPERTIES:
            data = dict(data)
            title = data.pop("title")
            main_image = UNSPLASH.format(data.pop("image"), 1200, 800)
            prop, _ = Property.objects.get_or_create(
                listed_by=realtor,
                title=title,
                defaults={
                    **data,
                    "status": Property.Status.ACTIVE,
                    "main_image": main_image,
                    "images": [main_image],
                },
            )
            properties[title] = prop
        return properties

    def _seed_appointments(self, realtor, clients: dict, properties: dict) -> None:
        # Dates are re-anchored to the current day on every run
        today = timezone.localdate()
        for title, location, offset, at, client_name, property_title, notes in APPOINTMENTS:
            when = timezone.make_aware(datetime.combine(today + timedelta(days=offset), at))
            Appointment.objects.update_or_create(
                realtor=realtor,
                title=title,
                location=location,
                defaults={
                    "date": when,
                    "client": clients[client_name],
                    "property": properties.get(property_title) if property_title else None,
                    "notes": notes,
                },
            )

    def _seed_activities(self, realtor, properties: dict) -> None:
        now = timezone.now()
        for activity_type, title, description, property_title, minutes_ago in ACTIVITIES:
            activity, created = Activity.objects.get_or_create(
                user=realtor,
                type=activity_type,
                title=title,
                defaults={
                    "description": description,
                    "property": properties.get(property_title) if property_title else None,
                },
            )
            if created:
                # created_at is auto_now_add, backdate through update()
                Activity.objects.filter(pk=activity.pk).update(
                    created_at=now - timedelta(minutes=minutes_ago)
                )

    def _seed_theme(self) -> None:
        ThemeSettings.objects.get_or_create(name="Default", defaults={"is_active": True})
        for section, values in HOME_CONTENT.items():
            for key, value in values.items():
                SiteContent.objects.get_or_create(
                    page="home",
                    section_name=section,
                    content_key=key,
                    defaults={"content_value": value},
                )

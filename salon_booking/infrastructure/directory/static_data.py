from __future__ import annotations

from salon_booking.domain.entities.catalog import LocationOption, ServiceCatalogEntry, StylistOption

SERVICE_CATALOG: list[ServiceCatalogEntry] = [
    ServiceCatalogEntry(id="svc-balayage", name="Balayage", category="Color & Blonding", duration_minutes=180, price=325),
    ServiceCatalogEntry(id="svc-gloss", name="Gloss", category="Color & Blonding", duration_minutes=45, price=85),
    ServiceCatalogEntry(id="svc-root-touch-up", name="Root Touch-Up", category="Color & Blonding", duration_minutes=90, price=140),
    ServiceCatalogEntry(id="svc-blowout", name="Blowout", category="Cutting & Styling", duration_minutes=45, price=65),
    ServiceCatalogEntry(id="svc-haircut", name="Haircut", category="Cutting & Styling", duration_minutes=60, price=95),
    ServiceCatalogEntry(id="svc-consultation", name="New Client Consultation", category="Consultation", duration_minutes=30, price=None),
    ServiceCatalogEntry(id="svc-extension-install", name="Extension Install", category="Extensions", duration_minutes=240, price=None),
    ServiceCatalogEntry(id="svc-bond-treatment", name="Bond Repair Treatment", category="Treatments & Care", duration_minutes=30, price=45),
]

LOCATIONS: list[LocationOption] = [
    LocationOption(
        id="loc-weho",
        name="West Hollywood",
        address="8715 Santa Monica Blvd, West Hollywood, CA 90069",
        external_branch_ref="branch-weho",
    ),
    LocationOption(
        id="loc-studio-city",
        name="Studio City",
        address="12345 Ventura Blvd, Studio City, CA 91604",
        external_branch_ref="branch-studio-city",
    ),
]

STYLISTS_BY_BRANCH: dict[str, list[StylistOption]] = {
    "branch-weho": [
        StylistOption(id="usr-sarah", external_staff_ref="staff-sarah", name="Sarah Mitchell"),
        StylistOption(id="usr-jordan", external_staff_ref="staff-jordan", name="Jordan Lee"),
        StylistOption(id="usr-taylor", external_staff_ref="staff-taylor", name="Taylor Brooks"),
    ],
    "branch-studio-city": [
        StylistOption(id="usr-alex", external_staff_ref="staff-alex", name="Alex Rivera"),
        StylistOption(id="usr-morgan", external_staff_ref="staff-morgan", name="Morgan Chen"),
        StylistOption(id="usr-casey", external_staff_ref="staff-casey", name="Casey Kim"),
    ],
}

"""
Static catalogue of monitored regions.

Each region lists the independent feeds searched by name/URL and, where
known, territorial control polygons and active armed groups.
"""

from typing import Dict, List

from intel.models import MilitantGroup, MonitoredSource, Region, Severity, Territory


def _polygon(*points):
    return tuple(tuple(p) for p in points)


_WIKI = "https://upload.wikimedia.org/wikipedia/commons/thumb"

REGIONS: List[Region] = [
    Region(
        id="ukraine",
        name="Ukraine",
        lat=48.3794,
        lng=31.1656,
        zoom=6,
        description="Ongoing Russo-Ukrainian war dynamics and frontline shifts.",
        monitored_sources=(
            MonitoredSource("DeepStateUA", "https://t.me/DeepStateUA", "Pro-Ukraine/Map"),
            MonitoredSource("War Mapper", "https://x.com/War_Mapper", "OSINT/Visual"),
            MonitoredSource("Osinttechnical", "https://x.com/Osinttechnical", "Combat Footage/OSINT"),
        ),
    ),
    Region(
        id="syria",
        name="Syria",
        lat=34.8021,
        lng=38.9968,
        zoom=7,
        description="Complex landscape following the collapse of central authority in major hubs.",
        monitored_sources=(
            MonitoredSource("Intel Rojava", "https://t.me/Intel_Rojava", "Pro-SDF/Rojava"),
            MonitoredSource("Kurdish Front News", "https://t.me/KurdishFrontNews", "Pro-SDF/Rojava"),
            MonitoredSource("Idlib Marsad", "https://t.me/idlib_marsad", "Pro-Gov/Consolidated"),
            MonitoredSource("Step News", "https://t.me/stepnews", "Pro-Gov/Consolidated"),
            MonitoredSource("Suwayda 24/7", "https://t.me/+g7Jum6v4Pwc5Nzc8", "Druze/Southern"),
            MonitoredSource("Protest Syria", "https://t.me/protest_syria", "Pro-Gov/Consolidated"),
        ),
        territories=(
            Territory(
                id="pro-government",
                name="Pro-Gov Consolidated",
                color="#22c55e",
                coordinates=(
                    _polygon(
                        (36.65, 36.15), (36.65, 36.40), (36.60, 36.60), (36.62, 36.90), (36.55, 37.10),
                        (36.50, 37.40), (36.45, 37.80), (36.10, 38.30), (35.80, 38.40), (35.50, 38.80),
                        (34.80, 40.20), (34.40, 40.85), (33.80, 40.10), (33.40, 39.50), (33.10, 39.00),
                        (32.35, 38.80), (32.30, 38.50), (32.30, 38.00), (32.35, 37.50), (32.30, 37.20),
                        (32.30, 36.80), (32.35, 36.50), (33.10, 36.05), (33.25, 36.20), (33.50, 36.40),
                        (33.80, 36.55), (34.10, 36.65), (34.45, 36.50), (34.65, 36.15), (34.80, 35.95),
                        (35.10, 35.85), (35.40, 35.90), (35.80, 35.85), (36.10, 35.90), (36.40, 36.00),
                    ),
                ),
            ),
            Territory(
                id="sdf-rojava",
                name="SDF (Rojava)",
                color="#fbbf24",
                coordinates=(
                    _polygon(
                        (36.75, 38.10), (36.85, 39.00), (36.95, 40.00), (37.05, 41.00), (37.15, 41.80),
                        (37.20, 42.20), (36.50, 42.30), (36.00, 42.10), (35.50, 40.90), (35.20, 40.60),
                        (35.40, 40.00), (35.70, 39.50), (35.90, 38.80), (36.20, 38.20), (36.50, 38.00),
                    ),
                ),
            ),
        ),
        militant_groups=(
            MilitantGroup(
                "Hayat Tahrir al-Sham (HTS)",
                "The dominant force in Idlib, formerly affiliated with al-Qaeda, now positioning as a "
                "localized governing authority.",
                "Active",
                "Idlib Governorate",
                f"{_WIKI}/7/74/Flag_of_Hayat_Tahrir_al-Sham.svg/512px-Flag_of_Hayat_Tahrir_al-Sham.svg.png",
            ),
            MilitantGroup(
                "Syrian National Army (SNA)",
                'A coalition of Turkish-backed opposition groups primarily active in northern "safe zones".',
                "Active",
                "Northern Syria",
                f"{_WIKI}/6/6f/Flag_of_the_Syrian_National_Army.svg/512px-Flag_of_the_Syrian_National_Army.svg.png",
            ),
            MilitantGroup(
                "National Defense Forces (NDF)",
                "Pro-government paramilitary organization formed to support regular army operations.",
                "Active",
                "Nationwide",
                f"{_WIKI}/d/d4/National_Defence_Forces_logo.svg/512px-National_Defence_Forces_logo.svg.png",
            ),
        ),
    ),
    Region(
        id="lebanon",
        name="Lebanon",
        lat=33.8547,
        lng=35.8623,
        zoom=9,
        description="Monitoring domestic instability and regional spillover effects.",
        monitored_sources=(
            MonitoredSource("MTV Lebanon News", "https://x.com/MTVLebanonNews", "Independent/Local"),
            MonitoredSource("News Hub Lebanon", "https://t.me/LebanonNews", "OSINT/Regional"),
            MonitoredSource("Faytuks News", "https://x.com/Faytuks", "OSINT/Global"),
        ),
        territories=(
            Territory(
                id="lebanon-sovereign",
                name="Lebanon Sovereign",
                color="#ef4444",
                coordinates=(
                    _polygon(
                        (33.10, 35.10), (33.10, 35.80), (33.35, 35.85), (33.45, 36.25), (33.80, 36.50),
                        (34.15, 36.65), (34.40, 36.55), (34.65, 36.05), (34.60, 35.95), (34.40, 35.80),
                        (34.10, 35.60), (33.80, 35.40), (33.40, 35.30), (33.20, 35.15),
                    ),
                ),
            ),
            Territory(
                id="unifil-zone",
                name="UNIFIL Buffer Zone",
                color="#3b82f6",
                coordinates=(
                    _polygon((33.10, 35.10), (33.10, 35.80), (33.30, 35.80), (33.35, 35.40), (33.30, 35.10)),
                ),
            ),
        ),
        militant_groups=(
            MilitantGroup(
                "Hezbollah",
                "Powerful Shiite political party and militant group with a massive arsenal, heavily "
                "supported by Iran.",
                "Active",
                "Southern Lebanon / Beqaa",
                f"{_WIKI}/c/cb/Flag_of_Hezbollah.svg/512px-Flag_of_Hezbollah.svg.png",
            ),
            MilitantGroup(
                "Amal Movement",
                "Shiite political party and former militia, led by Nabih Berri, allied with Hezbollah.",
                "Active",
                "Beirut / Southern Lebanon",
                f"{_WIKI}/7/7b/Logo_of_the_Amal_Movement.svg/512px-Logo_of_the_Amal_Movement.svg.png",
            ),
            MilitantGroup(
                "Palestinian Islamic Jihad",
                "Active in Palestinian refugee camps, maintains an armed presence and coordinates with "
                "local factions.",
                "Active",
                "Refugee Camps",
                f"{_WIKI}/f/f6/Flag_of_Palestinian_Islamic_Jihad.svg/512px-Flag_of_Palestinian_Islamic_Jihad.svg.png",
            ),
            MilitantGroup(
                "al-Fajr Forces (Islamic Group)",
                "The armed wing of al-Jama'a al-Islamiya, recently re-emerged in cross-border engagements.",
                "Active",
                "Southern Lebanon",
                f"{_WIKI}/b/b5/Jamaa_Islamiya_Lebanon_Logo.svg/512px-Jamaa_Islamiya_Lebanon_Logo.svg.png",
            ),
            MilitantGroup(
                "Syrian Social Nationalist Party (SSNP)",
                "A secular nationalist group with armed wings that support regional resistance axes.",
                "Active",
                "Nationwide",
                f"{_WIKI}/b/bc/SSNP_Logo.svg/512px-SSNP_Logo.svg.png",
            ),
        ),
    ),
    Region(
        id="iran",
        name="Iran",
        lat=32.4279,
        lng=53.6880,
        zoom=5,
        description="Internal security dynamics, protest monitoring, and regional strategic posture.",
        monitored_sources=(
            MonitoredSource("Iran International", "https://x.com/IranIntl", "Opposition/Independent"),
            MonitoredSource("1500tasvir", "https://x.com/1500tasvir", "Protest Monitoring"),
            MonitoredSource("Jason Brodsky", "https://x.com/JasonMBrodsky", "Security Analyst"),
        ),
        territories=(
            Territory(
                id="iran-sovereign",
                name="Iran Sovereign",
                color="#10b981",
                coordinates=(
                    _polygon(
                        (39.7, 44.1), (39.7, 48.0), (38.4, 48.4), (37.5, 49.0), (37.0, 54.0), (38.0, 56.5),
                        (37.3, 59.0), (35.5, 61.2), (33.0, 60.5), (30.0, 62.0), (25.0, 61.5), (25.5, 57.0),
                        (27.0, 54.0), (29.0, 48.5), (31.0, 47.5), (33.5, 45.8), (37.0, 44.5), (39.7, 44.1),
                    ),
                ),
            ),
        ),
        militant_groups=(
            MilitantGroup(
                "IRGC (Quds Force)",
                "Elite wing of the Revolutionary Guard responsible for unconventional warfare and regional "
                "operations.",
                "Active",
                "Foreign / Regional",
                f"{_WIKI}/f/f2/Seal_of_the_Islamic_Revolutionary_Guard_Corps.svg/"
                "512px-Seal_of_the_Islamic_Revolutionary_Guard_Corps.svg.png",
            ),
            MilitantGroup(
                "Basij",
                "Large volunteer paramilitary organization under the IRGC used for internal security and "
                "social control.",
                "Active",
                "Nationwide",
                f"{_WIKI}/8/81/Seal_of_the_Basij.svg/512px-Seal_of_the_Basij.svg.png",
            ),
            MilitantGroup(
                "Jaish al-Adl",
                "Salafi jihadist militant group operating primarily in the Sistan and Baluchestan Province.",
                "Active",
                "Southeastern Borders",
                f"{_WIKI}/5/52/Flag_of_Jaish_al-Adl.svg/512px-Flag_of_Jaish_al-Adl.svg.png",
            ),
        ),
    ),
    Region(
        id="israel-palestine",
        name="Israel-Palestine",
        lat=31.0461,
        lng=34.8516,
        zoom=8,
        description="Active combat monitoring across Gaza and regional northern/southern borders.",
        monitored_sources=(
            MonitoredSource("Aurora Intel", "https://x.com/AuroraIntel", "OSINT/Regional"),
            MonitoredSource("Sentinel Defender", "https://x.com/sentdefender", "Geo-Intelligence"),
            MonitoredSource("Palestine RCS", "https://x.com/PalestineRCS", "Humanitarian/Gaza"),
        ),
    ),
]

SEVERITY_COLORS: Dict[Severity, str] = {
    Severity.LOW: "#fbbf24",
    Severity.MEDIUM: "#f97316",
    Severity.HIGH: "#ef4444",
    Severity.CRITICAL: "#7f1d1d",
}

_REGIONS_BY_ID: Dict[str, Region] = {r.id: r for r in REGIONS}


def get_region(region_id: str) -> Region:
    """Look up a catalogued region by id.

    Raises:
        ValueError: if no region has that id
    """
    region = _REGIONS_BY_ID.get(region_id)
    if region is None:
        known = ", ".join(sorted(_REGIONS_BY_ID))
        raise ValueError(f"Unknown region: {region_id}. Known regions: {known}")
    return region

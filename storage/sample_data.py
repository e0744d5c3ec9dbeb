# storage/sample_data.py
"""
Starter catalog: five categories with one device each.

Used to pre-fill the in-memory backend and by dev_scripts/seed_device_catalog.py.
"""

# (name, icon)
CATEGORIES = [
    ("Cutting Tools",     "content_cut"),
    ("Drilling Tools",    "construction"),
    ("Welding Equipment", "local_fire_department"),
    ("Measuring Tools",   "straighten"),
    ("Finishing Tools",   "format_paint"),
]

# category name → device payloads (snake_case keys, as the store expects)
DEVICES = {
    "Cutting Tools": [{
        "name": "Laser Cutter",
        "icon": "hub",
        "short_description": "Precision cutting tool for metal sheets using focused laser beams",
        "specifications": {
            "Power": "400W",
            "Cutting Area": "1200mm x 900mm",
            "Precision": "±0.1mm",
            "Max Cutting Thickness": "10mm (steel)",
            "Wavelength": "1064nm",
        },
        "materials": {
            "Mild Steel": "Up to 10mm",
            "Stainless Steel": "Up to 8mm",
            "Aluminum": "Up to 6mm",
            "Copper": "Up to 3mm",
            "Brass": "Up to 3mm",
        },
        "safety_requirements": [
            "Always wear laser safety goggles when operating",
            "Never leave the machine unattended during operation",
            "Ensure proper ventilation for fume extraction",
            "Keep flammable materials away from cutting area",
            "Inspect machine for damage before each use",
            "Use only approved materials for cutting",
        ],
        "usage_instructions": [
            {"title": "Prepare Your Design",
             "description": "Create or import your design in the CAD software. Check dimensions are within the machine's capabilities."},
            {"title": "Material Setup",
             "description": "Place the metal sheet on the cutting bed, flat and secured with the clamps provided."},
            {"title": "Machine Configuration",
             "description": "Select power, speed and focus settings for the material type and thickness."},
            {"title": "Ventilation Check",
             "description": "Make sure the ventilation system is running before starting the cut."},
            {"title": "Test Run",
             "description": "Run the cutting path with the laser off to confirm it is correct and unobstructed."},
            {"title": "Execute Cutting Process",
             "description": "Close the safety shield, wear goggles and start the cut from the control panel."},
            {"title": "Post-Cut Procedure",
             "description": "Wait for the fumes to clear before opening the shield and removing the part."},
        ],
        "troubleshooting": [
            {"issue": "Laser Not Cutting Through Material",
             "solutions": ["Increase power settings", "Decrease cutting speed",
                           "Check focus distance", "Clean lens of any debris or smudges"]},
            {"issue": "Irregular Cut Edges",
             "solutions": ["Check for a worn nozzle", "Verify material is flat and secured",
                           "Reduce cutting speed", "Check assist gas pressure"]},
            {"issue": "Machine Won't Power On",
             "solutions": ["Check power connections", "Verify emergency stop is not engaged",
                           "Check circuit breakers", "Contact instructor if issues persist"]},
        ],
    }],
    "Drilling Tools": [{
        "name": "Metal Drill Press",
        "icon": "psychology",
        "short_description": "Precision drilling machine for creating holes in metal workpieces",
        "specifications": {
            "Motor Power": "1.5 HP",
            "Spindle Speed Range": "150-4200 RPM",
            "Drill Chuck Size": "5/8 inch (16mm)",
            "Max Drilling Capacity (Steel)": "25mm",
            "Table Size": "400mm x 400mm",
        },
        "materials": {
            "Mild Steel": "Excellent compatibility",
            "Stainless Steel": "Good with proper bits and cooling",
            "Aluminum": "Excellent compatibility",
            "Cast Iron": "Good compatibility",
        },
        "safety_requirements": [
            "Always wear safety glasses or face shield",
            "Secure loose clothing, jewelry, and long hair",
            "Always secure workpiece firmly with clamps or vise",
            "Never adjust workpiece while drill is running",
            "Remove chips with brush, never by hand",
        ],
        "usage_instructions": [
            {"title": "Machine Setup",
             "description": "Fit the right bit and tighten it with the chuck key. Never leave the key in the chuck."},
            {"title": "Speed Selection",
             "description": "Harder metals and larger bits need slower spindle speeds."},
            {"title": "Workpiece Preparation",
             "description": "Center punch the drilling point so the bit does not wander."},
            {"title": "Drilling Process",
             "description": "Lower the bit slowly with steady pressure and use cutting fluid."},
        ],
        "troubleshooting": [
            {"issue": "Drill Bit Wandering",
             "solutions": ["Use a center punch", "Start at a slower speed",
                           "Use a shorter, more rigid bit"]},
            {"issue": "Excessive Heat or Smoking",
             "solutions": ["Reduce drilling speed", "Apply more cutting fluid",
                           "Replace a dull bit", "Peck drill deep holes"]},
        ],
    }],
    "Welding Equipment": [{
        "name": "TIG Welder",
        "icon": "bolt",
        "short_description": "Tungsten Inert Gas welder for high-quality, precision metal joining",
        "specifications": {
            "Power Input": "220V, Single Phase",
            "Output Range": "5-200 Amps",
            "Duty Cycle": "60% at 200A",
            "Pulse Frequency": "0.5-200 Hz",
            "Cooling": "Forced Air",
        },
        "materials": {
            "Stainless Steel": "Excellent results",
            "Aluminum": "Very good with AC current",
            "Mild Steel": "Excellent results",
            "Titanium": "Excellent with proper shielding",
        },
        "safety_requirements": [
            "Always wear a welding helmet with the correct shade (10-13)",
            "Use flame-resistant clothing covering all exposed skin",
            "Wear dry, insulated welding gloves",
            "Ensure proper ventilation to remove welding fumes",
            "Keep a fire extinguisher nearby",
        ],
        "usage_instructions": [
            {"title": "Equipment Setup",
             "description": "Attach the ground clamp, install the correct tungsten and check gas connections."},
            {"title": "Gas Selection",
             "description": "Use pure argon for aluminum and stainless steel at 15-20 CFH."},
            {"title": "Machine Settings",
             "description": "AC for aluminum and magnesium, DC- for steel. Set amperage by material thickness."},
            {"title": "Post-Weld Procedure",
             "description": "Keep gas flowing 5-10 seconds after the arc stops to protect the cooling weld."},
        ],
        "troubleshooting": [
            {"issue": "Tungsten Contamination",
             "solutions": ["Increase gas flow rate", "Keep tungsten away from the weld pool",
                           "Re-grind tungsten with a dedicated grinder"]},
            {"issue": "Porosity in Weld",
             "solutions": ["Clean base metal with acetone", "Check for drafts",
                           "Maintain proper arc length"]},
        ],
    }],
    "Measuring Tools": [{
        "name": "Digital Caliper",
        "icon": "architecture",
        "short_description": "Precision measuring tool for accurate dimensional measurements",
        "specifications": {
            "Range": "0-150mm (0-6 inches)",
            "Resolution": "0.01mm (0.0005 inches)",
            "Accuracy": "±0.02mm",
            "Battery": "SR44 or LR44",
        },
        "materials": {
            "Metal Parts": "Excellent for all metal surfaces",
            "Plastic Components": "Good, avoid excessive pressure",
            "Soft Materials": "May compress under pressure, affecting readings",
        },
        "safety_requirements": [
            "Handle with clean hands to prevent corrosion",
            "Store in protective case when not in use",
            "Do not use as a scraper or marking tool",
        ],
        "usage_instructions": [
            {"title": "Preparation",
             "description": "Wipe the jaws clean and zero the caliper with the jaws closed."},
            {"title": "External Measurement",
             "description": "Close the large jaws gently on the part and read the display."},
            {"title": "Depth Measurement",
             "description": "Rest the base on the surface and extend the depth rod to the bottom."},
        ],
        "troubleshooting": [
            {"issue": "Display Shows Erratic Readings",
             "solutions": ["Replace battery", "Clean measuring surfaces with alcohol",
                           "Check for debris in the track"]},
        ],
    }],
    "Finishing Tools": [{
        "name": "Bench Grinder",
        "icon": "settings",
        "short_description": "Stationary power tool used for sharpening, shaping, and finishing metal workpieces",
        "specifications": {
            "Motor Power": "3/4 HP",
            "Wheel Size": "8 inch (200mm)",
            "Speed": "3450 RPM",
            "Wheel Types": "Coarse (36 grit), Fine (60 grit)",
        },
        "materials": {
            "High-Speed Steel": "Excellent for sharpening",
            "Tool Steel": "Excellent",
            "Non-ferrous Metals": "Use dedicated wheel only",
        },
        "safety_requirements": [
            "Always wear impact-resistant safety glasses or face shield",
            "Never operate without wheel guards and eye shields in place",
            "Adjust work rests to within 1/8 inch (3mm) of wheel",
            "Stand to the side when starting the grinder",
        ],
        "usage_instructions": [
            {"title": "Pre-Operation Inspection",
             "description": "Check the wheel for cracks and make sure guards and shields are in place."},
            {"title": "Grinder Start-Up",
             "description": "Stand to the side, switch on and let the wheel reach full speed."},
            {"title": "Metal Grinding",
             "description": "Use the wheel face, not the side, and quench the workpiece often."},
        ],
        "troubleshooting": [
            {"issue": "Excessive Vibration",
             "solutions": ["Check for uneven wheel wear", "Inspect mounting bolts",
                           "Have the wheel dressed by the instructor"]},
        ],
    }],
}


def seed_catalog(store):
    """
    Create the starter categories and devices in *store*.

    Does nothing when the store already holds categories.  Returns the number
    of devices created.
    """
    if store.list_categories():
        return 0
    created = 0
    for name, icon in CATEGORIES:
        cat = store.create_category({"name": name, "icon": icon})
        for payload in DEVICES.get(name, []):
            store.create_device(dict(payload, category_id=cat.id))
            created += 1
    return created

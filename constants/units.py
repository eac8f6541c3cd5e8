"""
Unit Constants and Conversion Tables

Contains the measurement-unit registry used by cost calculations.
Every unit belongs to one category (mass, volume, count) and carries a
multiplier that converts one of it into the category's base unit.
"""

MASS = 'mass'
VOLUME = 'volume'
COUNT = 'count'

UNIT_CATEGORIES = (MASS, VOLUME, COUNT)

# Base unit for each category (all to_base factors are relative to these)
BASE_UNITS = {
    MASS: 'kg',
    VOLUME: 'L',
    COUNT: 'pcs',
}

# Unit registry (symbol -> definition)
UNITS = {
    # =========== MASS (base: kg) ===========
    'kg': {'category': MASS, 'to_base': 1,
           'aliases': ['kilo', 'kilos', 'kilogram', 'kilograms', 'κιλό', 'κιλα'],
           'display_name': 'Kilogram'},
    'g': {'category': MASS, 'to_base': 0.001,
          'aliases': ['gr', 'gram', 'grams', 'γρ', 'γραμμάρια'],
          'display_name': 'Gram'},
    'mg': {'category': MASS, 'to_base': 0.000001,
           'aliases': ['milligram', 'milligrams'],
           'display_name': 'Milligram'},
    'lb': {'category': MASS, 'to_base': 0.453592,
           'aliases': ['lbs', 'pound', 'pounds', 'λίβρα'],
           'display_name': 'Pound'},
    'oz': {'category': MASS, 'to_base': 0.0283495,
           'aliases': ['ounce', 'ounces', 'ουγγιά'],
           'display_name': 'Ounce'},

    # =========== VOLUME (base: L) ===========
    'L': {'category': VOLUME, 'to_base': 1,
          'aliases': ['lt', 'ltr', 'liter', 'liters', 'litre', 'litres', 'λίτρο'],
          'display_name': 'Liter'},
    'ml': {'category': VOLUME, 'to_base': 0.001,
           'aliases': ['milliliter', 'milliliters', 'millilitre'],
           'display_name': 'Milliliter'},
    'cl': {'category': VOLUME, 'to_base': 0.01,
           'aliases': ['centiliter', 'centilitre'],
           'display_name': 'Centiliter'},
    'dl': {'category': VOLUME, 'to_base': 0.1,
           'aliases': ['deciliter', 'decilitre'],
           'display_name': 'Deciliter'},
    'gal': {'category': VOLUME, 'to_base': 3.78541,
            'aliases': ['gallon', 'gallons', 'γαλόνι'],
            'display_name': 'Gallon'},
    'qt': {'category': VOLUME, 'to_base': 0.946353,
           'aliases': ['quart', 'quarts'],
           'display_name': 'Quart'},
    'pt': {'category': VOLUME, 'to_base': 0.473176,
           'aliases': ['pint', 'pints'],
           'display_name': 'Pint'},
    'cup': {'category': VOLUME, 'to_base': 0.236588,
            'aliases': ['cups', 'φλιτζάνι'],
            'display_name': 'Cup'},
    'tbsp': {'category': VOLUME, 'to_base': 0.0147868,
             'aliases': ['tbs', 'tablespoon', 'tablespoons', 'κ.σ.'],
             'display_name': 'Tablespoon'},
    'tsp': {'category': VOLUME, 'to_base': 0.00492892,
            'aliases': ['teaspoon', 'teaspoons', 'κ.γ.'],
            'display_name': 'Teaspoon'},
    'fl oz': {'category': VOLUME, 'to_base': 0.0295735,
              'aliases': ['fl_oz', 'floz', 'fluid ounce', 'fluid ounces'],
              'display_name': 'Fluid ounce'},

    # =========== COUNT (base: pcs) ===========
    'pcs': {'category': COUNT, 'to_base': 1,
            'aliases': ['pc', 'piece', 'pieces', 'ea', 'each', 'τεμ', 'τεμ.', 'τεμάχιο'],
            'display_name': 'Piece'},
    'dozen': {'category': COUNT, 'to_base': 12,
              'aliases': ['dz', 'doz', 'ντουζίνα'],
              'display_name': 'Dozen'},
    'slice': {'category': COUNT, 'to_base': 1,
              'aliases': ['slices', 'φέτα', 'φέτες'],
              'display_name': 'Slice'},
    'clove': {'category': COUNT, 'to_base': 1,
              'aliases': ['cloves', 'σκελίδα', 'σκελίδες'],
              'display_name': 'Clove'},
    'bunch': {'category': COUNT, 'to_base': 1,
              'aliases': ['bunches', 'ματσάκι'],
              'display_name': 'Bunch'},
}

# Preferred display units per category, largest first
PREFERRED_UNITS = {
    MASS: ['kg', 'g', 'mg'],
    VOLUME: ['L', 'ml'],
    COUNT: ['pcs'],
}

# Common units offered first in ingredient forms
COMMON_UNITS = ['kg', 'g', 'L', 'ml', 'pcs']

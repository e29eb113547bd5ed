"""Built-in sample document shown by ``ship-order show`` when no file is given."""

SAMPLE_ORDER_XML = """
<shipOrder>
    <shipTo>
        <name>Tove Svendson</name>
        <street>Ragnhildvei 2</street>
        <address>4000 Stavanger</address>
        <country>Norway</country>
    </shipTo>
    <items>
        <item>
            <title>Empire Burlesque</title>
            <quantity>1</quantity>
            <price>10.90</price>
        </item>
        <item>
            <title>Hide your heart</title>
            <quantity>1</quantity>
            <price>9.90</price>
        </item>
    </items>
</shipOrder>
"""

"""Intent labels and the canned reply for each of them.

``RESPONSES`` must cover every ``IntentLabel``; the check runs at import so a
missing reply stops the process before any index is built.
"""

from enum import Enum

from hope_chatbot.errors import ConfigurationError


class IntentLabel(str, Enum):
    DONATION = "donation"
    PROGRAMS = "programs"
    VOLUNTEER = "volunteer"
    MISSION = "mission"
    LOCATION = "location"
    MEMBERSHIP = "membership"
    GOVERNANCE = "governance"
    VALUES = "values"
    EVENTS = "events"
    FINANCIAL = "financial"
    LEGAL = "legal"
    LEADERSHIP = "leadership"
    REGISTRATION = "registration"
    GENERAL = "general"

    def __str__(self):
        return self.value


# Intent reported when a message could not be processed at all
ERROR_INTENT = "error"

CONTACT_EMAIL = "simiyuleviticus93@gmail.com"
CONTACT_PHONE = "0721660901"

FALLBACK_REPLY = (
    "I'm sorry, I'm having trouble understanding right now. "
    "Please contact us directly at mwalimuhopefoundation@gmail.com or call 0721660901."
)

RESPONSES = {
    IntentLabel.DONATION: """**Support Mwalimu Hope Foundation:**

💰 **Donation Methods:**
• Mobile Money: 0721660901
• Bank Transfer: Contact us for details
• Online: Visit our website
• In-person: Meghon Plaza, Bungoma Town

📊 **How Donations Are Used:**
• Education programs for underprivileged learners
• Mental health awareness and support
• Poverty reduction initiatives
• Healthcare programs
• Community development projects

✅ **Financial Transparency:**
• All funds are banked and audited annually
• Authorized expenses include operational costs and welfare activities
• Regular financial reports available

📞 **Contact:** simiyuleviticus93@gmail.com""",

    IntentLabel.PROGRAMS: """**Mwalimu Hope Foundation Programs:**

🎓 **Education Initiatives:**
• Promote access to quality education for underprivileged learners
• Provide scholarships and learning resources
• Educational workshops and training programs

🧠 **Mental Health & Healthcare:**
• Raise awareness about mental health and psychosocial well-being
• Provide counseling and support services
• Promote preventive and curative healthcare initiatives
• Community health awareness campaigns

🏘️ **Community Development:**
• Implement poverty reduction and economic empowerment initiatives
• Mobilize resources for community development projects
• Vocational training and skills development
• Infrastructure development projects

🤝 **Collaboration:**
• Partner with government and other organizations
• Community outreach and engagement
• Sustainable development initiatives

📞 **Contact:** simiyuleviticus93@gmail.com""",

    IntentLabel.VOLUNTEER: """**Volunteer with Mwalimu Hope Foundation:**

🤝 **Volunteer Opportunities:**
• Education program support and tutoring
• Mental health awareness campaigns
• Community outreach and engagement
• Healthcare initiatives and health drives
• Administrative and organizational support
• Event planning and management
• Fundraising and resource mobilization

📋 **How to Apply:**
1. Contact us at simiyuleviticus93@gmail.com
2. Specify your area of interest and skills
3. Attend an orientation session
4. Start making a difference in your community!

🎯 **Volunteer Benefits:**
• Gain valuable experience in community development
• Network with like-minded individuals
• Make a real impact in people's lives
• Develop new skills and knowledge

📞 **Contact:** simiyuleviticus93@gmail.com""",

    IntentLabel.MISSION: """**Mwalimu Hope Foundation:**

🌟 **Our Vision:**
To create a society where every individual has access to education, mental health support, and sustainable livelihoods.

🎯 **Our Mission:**
To empower communities through education, health advocacy, and poverty alleviation programs for sustainable development.

📋 **Core Objectives:**
1. Promote access to quality education for underprivileged learners
2. Raise awareness and provide support for mental health and psychosocial well-being
3. Implement poverty reduction and economic empowerment initiatives
4. Promote preventive and curative healthcare initiatives
5. Mobilize resources for community development projects
6. Collaborate with government and other organizations for sustainable development

🏢 **Status:** Non-political, non-profit, and non-sectarian charitable organization registered under the laws of Kenya

📞 **Contact:** simiyuleviticus93@gmail.com""",

    IntentLabel.LOCATION: """**Mwalimu Hope Foundation Location:**

🏢 **Physical Address:**
Meghon Plaza, Bungoma Town
Along Moi Avenue

📮 **Postal Address:**
P.O. Box 2072-50200
Bungoma, Kenya

📧 **Email:**
simiyuleviticus93@gmail.com

📞 **Contact Numbers:**
• CEO/Founder: 0721660901
• Secretary: 0792480017
• Advisor: 0727085726

🗺️ **How to Find Us:**
Located in the heart of Bungoma Town at Meghon Plaza, easily accessible along Moi Avenue. Our office is open for visits and consultations.

🕒 **Office Hours:**
Monday - Friday: 8:00 AM - 5:00 PM
Saturday: 9:00 AM - 1:00 PM""",

    IntentLabel.MEMBERSHIP: """**Join Mwalimu Hope Foundation:**

👥 **Membership Details:**
• Open to any person who supports the objectives of the Foundation
• No discrimination based on background or affiliation

✅ **Member Rights:**
• Participation in Foundation activities
• Voting rights in decision-making
• Access to Foundation reports and updates
• Networking opportunities
• Direct impact on community programs

📋 **Member Duties:**
• Uphold the Foundation Constitution
• Support Foundation objectives and activities
• Act in the best interest of the Foundation
• Maintain integrity and professionalism

📝 **How to Join:**
1. Contact us at simiyuleviticus93@gmail.com
2. Express your interest in joining
3. Complete the membership process
4. Attend orientation and start contributing!

📞 **Contact:** simiyuleviticus93@gmail.com""",

    IntentLabel.GOVERNANCE: """**Mwalimu Hope Foundation Governance:**

🏛️ **Board Structure:**
• Chief Executive Officer (CEO)/Founder
• Secretary
• Treasurer
• Two Board Members
• Advisors (non-voting)

⏰ **Tenure:**
• Officials serve for three (3) years
• Renewable upon re-election

📅 **Meetings:**
• Annual General Meeting (AGM) - held annually
• Board Meetings - held quarterly
• Quorum: two-thirds of members required

🤝 **Decision Making:**
• Democratic process with member participation
• Two-thirds majority for major decisions
• Transparent and accountable governance

📞 **Contact:** simiyuleviticus93@gmail.com""",

    IntentLabel.VALUES: """**Mwalimu Hope Foundation Values:**

🎯 **Core Values:**
• **Integrity** - Honest and ethical in all dealings
• **Accountability** - Transparent and responsible to stakeholders
• **Inclusivity** - Open to all regardless of background
• **Professionalism** - High standards in all activities
• **Service to Humanity** - Dedicated to helping others

📋 **Principles:**
• Non-political, non-profit, and non-sectarian
• Committed to sustainable development
• Focused on community empowerment
• Transparent and accountable operations
• Collaborative approach with partners

🌟 **Commitment:**
All members commit to uphold the Constitution and act in the best interest of the Foundation.

📞 **Contact:** simiyuleviticus93@gmail.com""",

    IntentLabel.EVENTS: """**Mwalimu Hope Foundation Events:**

📅 **Regular Meetings:**
• Annual General Meeting (AGM) - held annually
• Board Meetings - held quarterly
• Community engagement sessions

🎯 **Program Events:**
• Educational workshops and training
• Mental health awareness campaigns
• Healthcare initiatives and health drives
• Community development activities
• Fundraising events
• Scholarship award ceremonies

📋 **Event Information:**
• Most events are open to the public
• Some events may require registration
• Community events are often free
• Special events may have nominal fees

📞 **For Event Details:**
Contact: simiyuleviticus93@gmail.com
Phone: 0721660901""",

    IntentLabel.FINANCIAL: """**Mwalimu Hope Foundation Finances:**

💰 **Funding Sources:**
• Donations from individuals and organizations
• Grants from government and international bodies
• Fundraising activities and events
• Community contributions

📊 **Fund Utilization:**
• Remuneration and allowances for executive leaders
• Operational costs and administrative expenses
• Welfare activities and community programs
• Education and healthcare initiatives
• Poverty alleviation projects

✅ **Financial Management:**
• All funds are properly banked
• Annual audits conducted
• Transparent financial reporting
• Accountable use of resources

📞 **Contact:** simiyuleviticus93@gmail.com""",

    IntentLabel.LEGAL: """**Mwalimu Hope Foundation Legal Status:**

📜 **Registration:**
• Registered under the laws of Kenya
• Non-political, non-profit, and non-sectarian
• Charitable organization status

⚖️ **Legal Framework:**
• Governed by Kenyan law
• Compliant with all regulations
• Transparent operations

🤝 **Dispute Resolution:**
1. **Negotiation** - First step in conflict resolution
2. **Mediation** - Third-party facilitated discussions
3. **Arbitration** - Formal dispute resolution process
4. **Court** - Last resort for unresolved disputes

🛡️ **Legal Protection:**
• Officials protected from liability for good faith actions
• Foundation assumes liability for authorized obligations
• Clear legal framework for operations

📞 **Contact:** simiyuleviticus93@gmail.com""",

    IntentLabel.LEADERSHIP: """**Mwalimu Hope Foundation Leadership Team:**

👨‍💼 **CEO/Founder:**
**Simiyu Leviticus**
• ID: 32813494
• Phone: 0721660901
• Email: simiyuleviticus93@gmail.com
• Role: Chief Executive Officer and Founder

👩‍💼 **Secretary:**
**Anjeline Nafula Juma**
• ID: 33245059
• Phone: 0792480017
• Role: Secretary and Administrative Officer

👨‍⚕️ **Advisor:**
**Dr. Mbiti Mwondi**
• Phone: 0727085726
• Qualifications: Medical Doctor, Mental Health Advocate
• Specialization: Psychiatric Resident (UoN), Public Health & Digital Health Expert
• Role: Medical and Mental Health Advisor

🏛️ **Board Structure:**
• CEO/Founder (Simiyu Leviticus)
• Secretary (Anjeline Nafula Juma)
• Treasurer (To be appointed)
• Two Board Members (To be appointed)
• Advisors (Dr. Mbiti Mwondi and others)

📞 **Contact Leadership:**
For specific inquiries, contact the relevant official directly using their phone numbers above.""",

    IntentLabel.REGISTRATION: """**Mwalimu Hope Foundation Registration Status:**

📋 **Registration Status:**
• **Status**: Application submitted to NGO Coordination Board
• **Authority**: NGO Coordination Board, Kenya
• **Address**: P.O. Box 44617-00100, Nairobi, Kenya
• **Registration Number**: Pending (will be assigned upon approval)

📄 **Registration Process:**
• Application submitted for charitable foundation registration
• Operating as non-profit organization
• Focus: Education, mental health awareness, poverty alleviation, community empowerment
• Target: Vulnerable groups and sustainable development

📋 **Required Documents Submitted:**
✅ Proposed constitution of the foundation
✅ List of proposed officials with ID copies and passport photos
✅ Minutes of the meeting resolving to register the foundation
✅ Proposed organizational structure
✅ Physical and postal address details

🏢 **Official Status:**
• Non-political, non-profit, and non-sectarian
• Charitable foundation under Kenyan law
• Application under review by NGO Coordination Board

📞 **Verification:**
Contact NGO Coordination Board for official verification of registration status.""",

    IntentLabel.GENERAL: """**About Mwalimu Hope Foundation:**

🏛️ **Organization:**
Mwalimu Hope Foundation is a charitable foundation established to champion education, mental health awareness, poverty alleviation, and community empowerment initiatives in Kenya.

📅 **Established:**
Constitution adopted on 25th August 2025 at Bungoma Town

🎯 **Focus Areas:**
• Education for underprivileged learners
• Mental health awareness and support
• Poverty reduction and economic empowerment
• Healthcare initiatives
• Community development
• Resource mobilization

🌍 **Service Area:**
Primarily Bungoma County with expanding reach to neighboring areas

📞 **Contact:**
simiyuleviticus93@gmail.com
Phone: 0721660901
Address: Meghon Plaza, Bungoma Town""",
}


def check_response_table(responses):
    """Raise ConfigurationError unless every intent label has a reply"""
    missing = [label.value for label in IntentLabel if not responses.get(label)]
    if missing:
        raise ConfigurationError(f"No response defined for intents: {', '.join(missing)}")


def response_for(intent, responses=RESPONSES):
    """Reply text for an intent, falling back to the general reply"""
    return responses.get(intent) or responses[IntentLabel.GENERAL]


check_response_table(RESPONSES)
